"""Contrato de proveedores de registros.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el proveedor remoto y el estático sean intercambiables y que el
  controlador se pruebe sin red.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import PostRecord


@runtime_checkable
class RecordProvider(Protocol):
    """Capacidad mínima para obtener registros.

    Reglas de diseño:
    - `fetch_records` es asíncrono porque típicamente hará I/O (HTTP).
    - El resultado fallido es una excepción derivada de `core.errors.FetchError`.
    - Devuelve los registros en el orden de la fuente, sin reordenar.
    """

    async def fetch_records(self) -> list[PostRecord]:
        """Obtiene la secuencia ordenada de registros de la fuente."""

        ...
