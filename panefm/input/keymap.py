"""Key binding tables."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class KeyBinding(Generic[T]):
    """One action reachable from one or more key tokens."""

    keys: tuple[str, ...]
    action: Callable[[], T]


class KeyMap(Generic[T]):
    """Exact-match key to action table."""

    def __init__(self) -> None:
        self._actions: dict[str, Callable[[], T]] = {}

    def bind(self, *bindings: KeyBinding[T]) -> KeyMap[T]:
        """Register bindings, later ones overriding earlier keys; returns ``self``."""
        for binding in bindings:
            for key in binding.keys:
                self._actions[key] = binding.action
        return self

    def __contains__(self, key: str) -> bool:
        return key in self._actions

    def dispatch(self, key: str) -> T | None:
        """Run the action bound to ``key``; ``None`` when nothing is bound."""
        action = self._actions.get(key)
        if action is None:
            return None
        return action()
