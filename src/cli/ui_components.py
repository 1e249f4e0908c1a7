"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La vista solo lee el estado publicado por el controlador; nunca lo escribe.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import PostRecord
from core.errors import PostboardError, TransportError


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text("POSTBOARD", style="bold cyan")
    subtitle = Text("Proveedor inyectado • Estado observable", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_records_table(records: Sequence[PostRecord]) -> Table:
    """Tabla Rich con los títulos, en el orden publicado."""

    table = Table(title=f"Posts ({len(records)})")
    table.add_column("ID", style="cyan", no_wrap=True, justify="right")
    table.add_column("Owner", style="dim", justify="right")
    table.add_column("Title", style="white")
    for record in records:
        table.add_row(str(record.id), str(record.owner_id), record.title)
    return table


def build_error_panel(error: PostboardError) -> Panel:
    """Panel para presentar un fallo de configuración u obtención."""

    body = Text()
    body.append(str(error).strip() or type(error).__name__)
    if isinstance(error, TransportError) and error.status_code is not None:
        body.append(f"\nHTTP status: {error.status_code}", style="dim")
    title = Text(type(error).__name__, style="bold red")
    return Panel(body, title=title, border_style="red")
