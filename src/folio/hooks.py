"""Hook registry used to broadcast resource lifecycle events.

Callbacks are registered per owner (a collection label such as ``posts`` or
the global ``resources`` owner) and event name (``post_init``,
``post_read``, ``pre_render``, ``post_render``, ``post_write``, ...).
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Iterable
from typing import Any

from folio.exceptions import InvalidHookError

logger = logging.getLogger(__name__)

HookCallback = Callable[..., Any]

PRIORITIES: dict[str, int] = {
    "low": 10,
    "normal": 20,
    "high": 30,
}


class HookBus:
    """Ordered registry of lifecycle callbacks.

    ``trigger`` runs callbacks from the highest priority down; callbacks sharing a
    priority run in registration order. Exceptions raised by callbacks are not
    caught.
    """

    def __init__(self) -> None:
        self._registry: dict[tuple[str, str], list[tuple[int, int, HookCallback]]] = defaultdict(list)
        self._counter = 0

    def register(
        self,
        owners: str | Iterable[str],
        event: str,
        callback: HookCallback,
        priority: str = "normal",
    ) -> HookCallback:
        if priority not in PRIORITIES:
            raise InvalidHookError(event, priority)
        if isinstance(owners, str):
            owners = [owners]
        for owner in owners:
            self._counter += 1
            self._registry[(owner, event)].append((PRIORITIES[priority], self._counter, callback))
        return callback

    def on(self, owners: str | Iterable[str], event: str, priority: str = "normal") -> Callable[[HookCallback], HookCallback]:
        """Decorator form of :meth:`register`."""

        def decorator(callback: HookCallback) -> HookCallback:
            return self.register(owners, event, callback, priority=priority)

        return decorator

    def callbacks(self, owner: str, event: str) -> list[HookCallback]:
        entries = sorted(self._registry.get((owner, event), []), key=lambda item: (-item[0], item[1]))
        return [callback for _, _, callback in entries]

    def trigger(self, owner: str, event: str, resource: Any, *args: Any) -> None:
        for callback in self.callbacks(owner, event):
            logger.debug("Hook %s:%s -> %r", owner, event, callback)
            callback(resource, *args)

    def clear(self) -> None:
        self._registry.clear()
