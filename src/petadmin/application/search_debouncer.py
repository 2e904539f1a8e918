"""SearchDebouncer — turns raw keystrokes into committed search terms.

Classic debounce on the asyncio event loop: every ``push`` cancels the
pending commit and schedules a new one ``interval`` seconds later. Only
a quiet period commits, so a user typing faster than the interval
produces no commit until they pause, and then exactly one.

``clear`` bypasses the delay: raw and committed values drop to "" at
once. The commit callback fires only when the committed value changes.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 0.3  # seconds


class SearchDebouncer:
    """Commits the last pushed search term once input has been quiet for ``interval``."""

    def __init__(
        self,
        on_commit: Callable[[str], None],
        interval: float = DEFAULT_INTERVAL,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        if interval < 0:
            raise ValueError(f"Debounce interval cannot be negative, got {interval}")
        self._on_commit = on_commit
        self._interval = interval
        self._loop = loop
        self._raw = ""
        self._committed = ""
        self._handle: asyncio.TimerHandle | None = None
        self._closed = False

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def committed(self) -> str:
        return self._committed

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, value: str) -> None:
        """Record a keystroke; (re)start the quiet-period timer.

        Must be called from a running event loop unless one was passed
        to the constructor.
        """
        if self._closed:
            return
        self._raw = value or ""
        self._cancel_pending()
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self._interval, self._commit)

    def submit(self, value: str) -> None:
        """Commit *value* right away, dropping any pending commit."""
        if self._closed:
            return
        self._cancel_pending()
        self._raw = value or ""
        self._set_committed(self._raw)

    def clear(self) -> None:
        """Reset raw and committed values immediately."""
        self._cancel_pending()
        self._raw = ""
        self._set_committed("")

    def flush(self) -> None:
        """Commit the pending raw value now instead of waiting."""
        if self._handle is None:
            return
        self._cancel_pending()
        self._set_committed(self._raw)

    def close(self) -> None:
        """Cancel any pending commit; later pushes are ignored."""
        self._cancel_pending()
        self._closed = True

    # --- Internal helpers -----------------------------------------------------

    def _commit(self) -> None:
        self._handle = None
        self._set_committed(self._raw)

    def _set_committed(self, value: str) -> None:
        if self._closed or value == self._committed:
            return
        self._committed = value
        logger.debug("Search term committed: %r", value)
        self._on_commit(value)

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
