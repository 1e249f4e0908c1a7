from __future__ import annotations

import json

import pytest

from adapters.json_exporter import export_records_json
from adapters.providers import RemoteRecordProvider, StaticRecordProvider
from core.errors import ConfigurationError, DecodingError
from core.services.composition import build_provider, load_fixture_records


def test_remote_provider_uses_settings_endpoint(settings) -> None:
    provider = build_provider(settings)

    assert isinstance(provider, RemoteRecordProvider)
    assert provider.url == settings.endpoint_url


def test_explicit_url_overrides_settings(settings) -> None:
    provider = build_provider(settings, url="http://localhost:8000/posts")

    assert isinstance(provider, RemoteRecordProvider)
    assert provider.url == "http://localhost:8000/posts"


def test_empty_url_is_configuration_error(settings) -> None:
    with pytest.raises(ConfigurationError):
        build_provider(settings, url="")


@pytest.mark.asyncio
async def test_static_flag_uses_default_records(settings) -> None:
    provider = build_provider(settings, static=True)

    assert isinstance(provider, StaticRecordProvider)
    assert [r.title for r in await provider.fetch_records()] == ["one", "two"]


@pytest.mark.asyncio
async def test_fixture_written_by_exporter_loads_back(settings, sample_records, tmp_path) -> None:
    path = export_records_json(records=sample_records, output_path=tmp_path / "out" / "posts.json")

    provider = build_provider(settings, fixture=path)

    assert isinstance(provider, StaticRecordProvider)
    assert await provider.fetch_records() == sample_records


def test_exported_file_is_wire_format(sample_records, tmp_path) -> None:
    path = export_records_json(records=sample_records[:1], output_path=tmp_path / "posts.json")

    assert json.loads(path.read_text(encoding="utf-8")) == [
        {"body": "third", "id": 30, "title": "gamma", "userId": 7}
    ]


def test_missing_fixture_is_configuration_error(tmp_path) -> None:
    with pytest.raises(ConfigurationError):
        load_fixture_records(tmp_path / "missing.json")


def test_non_utf8_fixture_is_configuration_error(tmp_path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b'[{"userId": 1, "id": 1, "title": "caf\xe9", "body": "b"}]')

    with pytest.raises(ConfigurationError):
        load_fixture_records(path)


def test_invalid_json_fixture_is_configuration_error(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_fixture_records(path)


def test_wrong_shape_fixture_is_decoding_error(tmp_path) -> None:
    path = tmp_path / "shape.json"
    path.write_text(json.dumps({"id": 1}), encoding="utf-8")

    with pytest.raises(DecodingError):
        load_fixture_records(path)
