"""Proveedor estático: registros en memoria.

Por qué existe:
- Sustituye al remoto en tests y previews sin tocar el controlador.
"""

from __future__ import annotations

from typing import Iterable

from core.domain.models import PostRecord
from core.interfaces.provider import RecordProvider


def default_records() -> list[PostRecord]:
    return [
        PostRecord(owner_id=1, id=1, title="one", body="one"),
        PostRecord(owner_id=2, id=2, title="two", body="two"),
    ]


class StaticRecordProvider(RecordProvider):
    """Devuelve siempre la misma secuencia, en el orden recibido."""

    def __init__(self, records: Iterable[PostRecord] | None = None) -> None:
        self._records = list(records) if records is not None else default_records()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(records={len(self._records)})"

    async def fetch_records(self) -> list[PostRecord]:
        return list(self._records)
