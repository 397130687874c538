"""Moment change detection loop and the one-shot greeting."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import date
from typing import Protocol

from benotified._constants import DEFAULT_POLL_INTERVAL, GREETING_MESSAGE, MOMENT_MESSAGE_TEMPLATE
from benotified.exceptions import FetchError

_logger = logging.getLogger(__name__)


class MomentSource(Protocol):
    """Anything that can report the latest moment id of a region."""

    async def get_latest_moment_id(self, region: str | None = None) -> str:
        ...


class Notifier(Protocol):
    """Anything that can broadcast a text message to the audience channel."""

    async def broadcast_text(self, text: str) -> None:
        ...


def format_moment_message(day: date) -> str:
    """Return the broadcast text for a new moment on *day*."""
    return MOMENT_MESSAGE_TEMPLATE.format(date=day.isoformat())


class MomentPoller:
    """Poll a region's latest moment id and broadcast when it changes.

    The last seen id lives only inside :meth:`run`. Fetch failures after
    start-up are logged and skipped; a failed initial fetch or a failed
    broadcast propagates to the caller, which decides whether to exit.

    Parameters
    ----------
    source : MomentSource
        Where moment ids come from (normally a :class:`~benotified.client.BeRealClient`).
    notifier : Notifier
        Where change messages go (normally a :class:`~benotified.line.LineBroadcaster`).
    region : str or None
        Region key to track. ``None`` lets the source use its default.
    interval : float
        Seconds to wait before every poll.
    sleep : callable
        Awaitable sleep, replaced in tests.
    today : callable
        Returns the current local date for the message.
    """

    def __init__(
        self,
        source: MomentSource,
        notifier: Notifier,
        *,
        region: str | None = None,
        interval: float = DEFAULT_POLL_INTERVAL,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._source = source
        self._notifier = notifier
        self._region = region
        self._interval = interval
        self._sleep = sleep
        self._today = today

    async def run(self, *, max_polls: int | None = None) -> str:
        """Run the loop and return the last seen id.

        With ``max_polls=None`` the loop never returns on its own.

        Raises
        ------
        FetchError
            The initial fetch failed.
        BroadcastError
            A change was detected but the broadcast failed.
        """
        sent_id = await self._source.get_latest_moment_id(self._region)
        _logger.info("Latest moment ID: %s", sent_id)

        polls = 0
        while max_polls is None or polls < max_polls:
            await self._sleep(self._interval)
            polls += 1
            sent_id = await self.poll_once(sent_id)
        return sent_id

    async def poll_once(self, sent_id: str) -> str:
        """Fetch once, broadcast on change, and return the id to keep."""
        try:
            current_id = await self._source.get_latest_moment_id(self._region)
        except FetchError as exc:
            _logger.warning("Error fetching latest ID: %s", exc)
            return sent_id

        if current_id == sent_id:
            return sent_id

        _logger.info("New moment detected! Old ID: %s, New ID: %s", sent_id, current_id)
        await self._notifier.broadcast_text(format_moment_message(self._today()))
        return current_id


async def broadcast_once(notifier: Notifier, message: str = GREETING_MESSAGE) -> None:
    """Send a single *message* and return."""
    await notifier.broadcast_text(message)
