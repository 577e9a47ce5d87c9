from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Union

from loguru import logger

DEFAULT_PRIORITY = 10


@dataclass(slots=True)
class HookCallback:
    handler: Callable[..., Any]
    priority: int = DEFAULT_PRIORITY
    accepted_args: int = 1

    def __call__(self, value: Any, args: tuple[Any, ...]) -> Any:
        return self.handler(*((value,) + args)[: self.accepted_args])


class HookRegistry:
    """
    Named extension points, each a list of (priority, handler) pairs.

    • filters pass a value through every handler and return the result
    • actions call every handler and ignore return values
    • lower priority runs first, equal priorities keep registration order
    """

    def __init__(self) -> None:
        self._hooks: Dict[str, List[HookCallback]] = {}
        self._fired: Counter[str] = Counter()

    # ── registration ─────────────────────────────────────────────────────────
    def add_filter(
        self,
        name: str,
        handler: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = 1,
    ) -> None:
        if not callable(handler):
            raise TypeError(f"Hook handler for {name!r} must be callable, got {type(handler).__name__}")
        if accepted_args < 0:
            raise ValueError(f"accepted_args must be >= 0, got {accepted_args}")

        callbacks = self._hooks.setdefault(name, [])
        if any(cb.handler == handler and cb.priority == priority for cb in callbacks):
            return

        callbacks.append(HookCallback(handler, priority, accepted_args))
        callbacks.sort(key=lambda cb: cb.priority)  # stable: ties keep insertion order
        logger.debug(f"hook added: {name} → {getattr(handler, '__name__', handler)} (priority={priority})")

    add_action = add_filter

    def remove_filter(self, name: str, handler: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> bool:
        callbacks = self._hooks.get(name, [])
        for idx, cb in enumerate(callbacks):
            if cb.handler == handler and cb.priority == priority:
                del callbacks[idx]
                if not callbacks:
                    self._hooks.pop(name, None)
                return True
        return False

    remove_action = remove_filter

    def has_filter(self, name: str, handler: Callable[..., Any] | None = None) -> Union[bool, int]:
        callbacks = self._hooks.get(name, [])
        if handler is None:
            return bool(callbacks)
        for cb in callbacks:
            if cb.handler == handler:
                return cb.priority
        return False

    has_action = has_filter

    # ── dispatch ─────────────────────────────────────────────────────────────
    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        for cb in list(self._hooks.get(name, [])):
            value = cb(value, args)
        return value

    def do_action(self, name: str, *args: Any) -> None:
        self._fired[name] += 1
        for cb in list(self._hooks.get(name, [])):
            if args:
                cb(args[0], args[1:])
            else:
                cb.handler()

    def did_action(self, name: str) -> int:
        return self._fired[name]
