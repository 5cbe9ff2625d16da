"""Stateful widgets that draw view trees over JSON-like state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Optional

from stackui.views import (
    JsonValue,
    View,
    ViewEvent,
    state_from_value,
    state_to_value,
)

Rect = tuple[int, int]
DrawView = Callable[[Any, ViewEvent, Rect], tuple[Any, View]]
ErasedDrawView = Callable[[JsonValue, ViewEvent, Rect], tuple[JsonValue, View]]


def convert_drawview(function: DrawView, state_type: Optional[type]) -> ErasedDrawView:
    """Wrap a typed draw function into one over JSON-like state and erased views."""

    def wrapped(value: JsonValue, event: ViewEvent, rect: Rect) -> tuple[JsonValue, View]:
        state, view = function(state_from_value(value, state_type), event, rect)
        return state_to_value(state), view.erase()

    return wrapped


class Widget(ABC):
    """A component holding a state of ``state_type`` that draws itself as a view."""

    state_type: ClassVar[type]

    def __init__(self, state: Any = None) -> None:
        self.state = self.state_type() if state is None else state

    @abstractmethod
    def draw(self) -> ErasedDrawView:
        """The draw function of this widget, over JSON-like state."""

    def take_state(self) -> Any:
        """Hand over the current state, leaving a default one in its place."""
        state = self.state
        self.state = self.state_type()
        return state

    def set_state(self, state: Any) -> None:
        self.state = state

    def draw_view(self, event: ViewEvent, rect: Rect) -> View:
        """Draw the widget into a view of the given size."""
        _, view = self.draw()(state_to_value(self.take_state()), event, rect)
        return view