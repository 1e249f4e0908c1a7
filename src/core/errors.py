"""Errores tipados del Core.

Por qué una jerarquía propia:
- Los proveedores traducen fallos de librerías (httpx, pydantic) a errores del
  dominio, así el controlador no conoce detalles de transporte.
- `FetchError` agrupa los resultados fallidos de `fetch_records` para que el
  manejo sea uniforme entre variantes de proveedor.
"""

from __future__ import annotations


class PostboardError(Exception):
    """Base de todos los errores de la aplicación."""


class ConfigurationError(PostboardError):
    """Configuración inválida detectada al construir un componente."""


class FetchError(PostboardError):
    """Una obtención de registros no pudo completarse."""


class TransportError(FetchError):
    """La petición no se completó (conexión, timeout o status no exitoso)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodingError(FetchError):
    """El cuerpo de la respuesta no tiene la forma de una lista de registros."""
