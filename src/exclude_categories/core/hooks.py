"""
Named action hooks.

The host fires actions by name ("init", "admin_menu", "pre_get_posts");
subscribers run synchronously in priority order, then registration order.
Callback errors propagate to whoever fired the action.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable

import structlog

logger = structlog.stdlib.get_logger()

ActionCallback = Callable[..., Any]

DEFAULT_PRIORITY = 10


@dataclass(frozen=True)
class _Subscription:
    priority: int
    order: int
    callback: ActionCallback


class HookRegistry:
    """Synchronous action dispatcher."""

    def __init__(self) -> None:
        self._actions: dict[str, list[_Subscription]] = defaultdict(list)
        self._counter = 0

    def add_action(
        self, hook: str, callback: ActionCallback, priority: int = DEFAULT_PRIORITY
    ) -> None:
        self._counter += 1
        subscriptions = self._actions[hook]
        subscriptions.append(_Subscription(priority, self._counter, callback))
        subscriptions.sort(key=lambda s: (s.priority, s.order))

    def has_action(self, hook: str) -> bool:
        return bool(self._actions.get(hook))

    def do_action(self, hook: str, *args: Any) -> None:
        subscriptions = self._actions.get(hook, [])
        if not subscriptions:
            return
        logger.debug("hooks.do_action", hook=hook, callbacks=len(subscriptions))
        for subscription in list(subscriptions):
            subscription.callback(*args)
