"""Cooperative cancellation for long traversals."""

import threading

from slnscout.core.errors import DiscoveryCancelled


class CancellationToken:
    """Thread-safe flag checked by traversals between directory dequeues."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise DiscoveryCancelled("Discovery was cancelled")
