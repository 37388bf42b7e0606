"""Notifier - a single transient status message with auto-expiry.

Showing a new message cancels the pending expiry of the previous one, so
only one timer is ever live. The app hands in Textual's ``set_timer``;
without one the running asyncio loop schedules the expiry.
"""

import asyncio
from collections.abc import Callable
from typing import Protocol

DEFAULT_NOTIFICATION_SECONDS = 4.0


class StoppableTimer(Protocol):
    def stop(self) -> None: ...


SetTimer = Callable[[float, Callable[[], None]], StoppableTimer]


class _LoopTimer:
    """asyncio TimerHandle with Textual's ``Timer.stop`` interface."""

    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(delay, callback)

    def stop(self) -> None:
        self._handle.cancel()


class Notifier:
    """Holds the current notification and clears it after ``timeout``."""

    def __init__(
        self,
        timeout: float = DEFAULT_NOTIFICATION_SECONDS,
        on_change: Callable[[str], None] | None = None,
        set_timer: SetTimer | None = None,
    ) -> None:
        self._timeout = timeout
        self._on_change = on_change
        self._set_timer: SetTimer = set_timer or _LoopTimer
        self._message = ""
        self._expiry: StoppableTimer | None = None

    @property
    def message(self) -> str:
        return self._message

    @property
    def timeout(self) -> float:
        return self._timeout

    def show(self, message: str) -> None:
        """Replace the message and restart the expiry timer.

        Must be called from within a running event loop.
        """
        self._cancel_expiry()
        self._set(message)
        if message:
            self._expiry = self._set_timer(self._timeout, self.clear)

    def clear(self) -> None:
        """Hide the message now."""
        self._cancel_expiry()
        self._set("")

    def _cancel_expiry(self) -> None:
        if self._expiry is not None:
            self._expiry.stop()
            self._expiry = None

    def _set(self, message: str) -> None:
        self._message = message
        if self._on_change is not None:
            self._on_change(message)
