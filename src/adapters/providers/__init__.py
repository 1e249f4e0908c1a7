"""Proveedores de registros (implementaciones concretas).

Por qué un paquete:
- Cada módulo implementa `core.interfaces.provider.RecordProvider`.
- La raíz de composición elige cuál inyectar.
"""

from adapters.providers.remote import RemoteRecordProvider, validate_endpoint_url
from adapters.providers.static import StaticRecordProvider, default_records

__all__ = [
	"RemoteRecordProvider",
	"StaticRecordProvider",
	"default_records",
	"validate_endpoint_url",
]
