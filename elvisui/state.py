"""Widgets with stored state and a callback run on events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

W = TypeVar("W")


class FnBox(ABC):
    """A stored callback; ``call`` raises ``FunctionError`` when it fails."""

    @abstractmethod
    def call(self, props: Any) -> None:
        """Run the callback with ``props``."""


@dataclass
class State(Generic[W]):
    """A widget together with its trigger and string key/value state."""

    widget: W
    trigger: FnBox
    _state: dict[str, str] = field(default_factory=dict, init=False, repr=False)

    def process(self, p: Any) -> None:
        """Run the trigger with ``p``."""
        self.trigger.call(p)

    def get(self, k: str) -> str:
        """The value stored under ``k``, or an empty string."""
        return self._state.get(k, "")

    def set(self, k: str, v: str) -> None:
        """Store ``v`` under ``k``."""
        self._state[k] = v