"""Exportación JSON de los registros obtenidos.

Por qué JSON:
- Usa el mismo formato de red que el endpoint, así el archivo sirve como
  fixture para `--fixture` (proveedor estático).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from core.domain.models import PostRecord, encode_records


def export_records_json(*, records: Iterable[PostRecord], output_path: Path) -> Path:
    """Exporta los registros a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = encode_records(records)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
