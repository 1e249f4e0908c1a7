"""Composition root helpers.

This is the single place that decides which concrete `RecordProvider` gets
wired into the controller. Entry-points (CLI, tests, future GUIs) call
`build_provider` instead of instantiating adapters themselves.
"""

from __future__ import annotations

import json
from pathlib import Path

from adapters.providers import RemoteRecordProvider, StaticRecordProvider
from core.config import AppSettings
from core.domain.models import PostRecord, decode_records
from core.errors import ConfigurationError
from core.interfaces.provider import RecordProvider
from core.log import get_logger

logger = get_logger(__name__)


def load_fixture_records(path: Path) -> list[PostRecord]:
    """Read a JSON fixture (wire format) for the static provider."""

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read fixture {path}: {exc}") from exc
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Fixture {path} is not valid JSON.") from exc
    return decode_records(data)


def build_provider(
    settings: AppSettings,
    *,
    static: bool = False,
    fixture: Path | None = None,
    url: str | None = None,
) -> RecordProvider:
    """Pick the provider variant for this run.

    - `fixture` wins: a static provider loaded from that file.
    - `static`: the static provider with its default records.
    - otherwise: the remote provider for `url` (or `settings.endpoint_url`).
    """

    if fixture is not None:
        logger.info("Using static provider from fixture %s", fixture)
        return StaticRecordProvider(load_fixture_records(fixture))
    if static:
        logger.info("Using static provider with default records")
        return StaticRecordProvider()

    endpoint = settings.endpoint_url if url is None else url
    logger.info("Using remote provider for %s", endpoint)
    return RemoteRecordProvider(endpoint, settings)
