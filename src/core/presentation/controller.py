"""Presentation controller (view model) for the records list.

The controller receives its `RecordProvider` from the composition root and
never builds or looks one up itself, so a `StaticRecordProvider` can replace
the remote one in tests and previews without touching this module.

Construction schedules exactly one fetch on the running event loop. The
result is applied on that loop, which owns the observable state; `records`
therefore has a single writer and needs no locking.
"""

from __future__ import annotations

import asyncio

from core.domain.models import FetchStatus, PostRecord
from core.errors import FetchError
from core.interfaces.provider import RecordProvider
from core.log import get_logger
from core.presentation.observable import Observable

logger = get_logger(__name__)


class RecordsController:
    """Holds the fetched records plus the status/error of the single fetch."""

    def __init__(self, provider: RecordProvider) -> None:
        self._provider = provider
        self.records: Observable[list[PostRecord]] = Observable([])
        self.status: Observable[FetchStatus] = Observable(FetchStatus.IDLE)
        self.error: Observable[FetchError | None] = Observable(None)

        # Raises RuntimeError outside a running loop.
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._load_records())

    @property
    def provider(self) -> RecordProvider:
        return self._provider

    async def wait_loaded(self) -> None:
        """Wait for the fetch started at construction; never starts another."""

        await asyncio.shield(self._task)

    async def _load_records(self) -> None:
        self.status.set(FetchStatus.LOADING)
        logger.debug("Fetching records with %r", self._provider)
        try:
            returned = list(await self._provider.fetch_records())
        except FetchError as exc:
            self._fail(exc)
            return
        except Exception as exc:
            logger.exception("Provider %r raised an unexpected error", self._provider)
            wrapped = FetchError(f"Unexpected provider error: {exc}")
            wrapped.__cause__ = exc
            self._fail(wrapped)
            return

        self.records.set(returned)
        self.status.set(FetchStatus.LOADED)
        logger.debug("Published %d records", len(returned))

    def _fail(self, exc: FetchError) -> None:
        logger.warning("Fetching records failed: %s", exc)
        self.error.set(exc)
        self.status.set(FetchStatus.FAILED)
