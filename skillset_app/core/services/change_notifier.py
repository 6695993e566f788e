"""Service for notifying subscribers after a store mutation."""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

ChangeListener = Callable[[str], None]


class ChangeNotifier:
    """Keeps listeners in subscription order and calls them with the operation name."""

    def __init__(self) -> None:
        self._listeners: list[ChangeListener] = []

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self, operation: str) -> None:
        logger.debug("Store changed: %s (%d listener(s))", operation, len(self._listeners))
        for listener in list(self._listeners):
            listener(operation)
