"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta del payload remoto en un único lugar.
- El alias `userId` documenta el formato de red sin filtrar camelCase al
  resto del código.

Nota:
- Estos modelos describen *qué* es un registro, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, Field, TypeAdapter, ValidationError
from pydantic.config import ConfigDict

from core.errors import DecodingError


class PostRecord(BaseModel):
    """Un elemento obtenido de la fuente (un post).

    Inmutable: una vez construido solo se reemplaza, nunca se modifica.
    Los enteros son estrictos: `"1"`, `true` o `2.0` no son ids válidos.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    owner_id: int = Field(
        ...,
        alias="userId",
        strict=True,
        description="Identificador del autor del registro.",
    )
    id: int = Field(
        ...,
        strict=True,
        description="Identificador del registro, único dentro de un resultado.",
    )
    title: str = Field(
        ...,
        description="Título mostrado por la vista.",
    )
    body: str = Field(
        ...,
        description="Contenido del registro.",
    )


class FetchStatus(str, Enum):
    """Estado de la única obtención que dispara el controlador."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


_RECORDS_ADAPTER = TypeAdapter(list[PostRecord])


def decode_records(payload: Any) -> list[PostRecord]:
    """Valida un JSON ya decodificado como lista ordenada de `PostRecord`."""

    if not isinstance(payload, list):
        raise DecodingError(
            f"Expected a JSON array of records, got {type(payload).__name__}."
        )
    try:
        return _RECORDS_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise DecodingError(
            f"Response does not match the record shape: {exc.error_count()} error(s)."
        ) from exc


def encode_records(records: Iterable[PostRecord]) -> list[dict[str, Any]]:
    """Representación de red (claves con alias) de una secuencia de registros."""

    return [record.model_dump(mode="json", by_alias=True) for record in records]
