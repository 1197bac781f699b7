"""Discard results of fetches overtaken by a newer one."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LatestFetchCoordinator(Generic[T]):
    """Hand out tickets to fetches and keep only the newest completed result.

    A fetch whose ticket is older than the last applied one finished after
    a later request and is dropped. Errors propagate to the caller of
    ``run`` and leave the current result untouched.
    """

    def __init__(self) -> None:
        self._issued = 0
        self._applied = 0
        self._latest: T | None = None

    @property
    def latest(self) -> T | None:
        return self._latest

    @property
    def pending(self) -> int:
        """Tickets issued after the last applied one."""
        return self._issued - self._applied

    async def run(self, fetch: Callable[[], Awaitable[T]]) -> T | None:
        """Await ``fetch`` and return its result, or None if it was superseded."""
        self._issued += 1
        ticket = self._issued

        result = await fetch()

        if ticket < self._applied:
            logger.debug(
                "Discarding fetch #%d; #%d already applied",
                ticket,
                self._applied,
            )
            return None

        self._applied = ticket
        self._latest = result
        return result
