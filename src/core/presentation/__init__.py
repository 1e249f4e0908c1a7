"""Estado de presentación (view models) independiente del framework de UI."""

from core.presentation.controller import RecordsController
from core.presentation.observable import Observable

__all__ = ["Observable", "RecordsController"]
