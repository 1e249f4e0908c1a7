"""Proveedor remoto: un único GET a un endpoint JSON.

- Valida la URL al construir (falla rápido, sin I/O).
- Traduce fallos de httpx/pydantic a `TransportError` / `DecodingError`.
- Sin reintentos: un intento, un resultado terminal.
"""

from __future__ import annotations

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import PostRecord, decode_records
from core.errors import ConfigurationError, DecodingError, TransportError
from core.interfaces.provider import RecordProvider
from core.log import get_logger

logger = get_logger(__name__)

_ALLOWED_SCHEMES = ("http", "https")


def validate_endpoint_url(url: str | None) -> str:
    """Normaliza y valida la URL del endpoint o lanza `ConfigurationError`."""

    candidate = (url or "").strip()
    if not candidate:
        raise ConfigurationError("Endpoint URL is empty.")
    try:
        parsed = httpx.URL(candidate)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ConfigurationError(f"Endpoint URL is malformed: {candidate!r}.") from exc
    if parsed.scheme not in _ALLOWED_SCHEMES:
        raise ConfigurationError(
            f"Endpoint URL must use http or https, got {candidate!r}."
        )
    if not parsed.host:
        raise ConfigurationError(f"Endpoint URL has no host: {candidate!r}.")
    return candidate


class RemoteRecordProvider(RecordProvider):
    """Obtiene registros de un endpoint HTTP que devuelve un array JSON."""

    def __init__(
        self,
        url: str,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = validate_endpoint_url(url)
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self._url!r})"

    async def fetch_records(self) -> list[PostRecord]:
        logger.debug("GET %s", self._url)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                resp = await client.get(self._url)
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request to {self._url} timed out.") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to {self._url} failed: {exc}") from exc

        if not resp.is_success:
            raise TransportError(
                f"{self._url} answered HTTP {resp.status_code}.",
                status_code=resp.status_code,
            )

        try:
            payload = resp.json()
        except ValueError as exc:
            raise DecodingError(f"{self._url} did not return valid JSON.") from exc

        records = decode_records(payload)
        logger.debug("Fetched %d records from %s", len(records), self._url)
        return records
