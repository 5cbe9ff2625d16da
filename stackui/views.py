"""Stack views, bounding-box layout and click dispatch over JSON-like state."""

from __future__ import annotations

import dataclasses
import types
import typing
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Union

JsonValue = Any
Handler = Callable[[Any], Any]

_BOLD_BRIGHT_BLUE = "\x1b[1;94m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"

_NAMED_TYPES = {
    "int": int,
    "str": str,
    "float": float,
    "bool": bool,
    "Any": Any,
    "typing.Any": Any,
}


class ViewType(Enum):
    """Axis along which a stack lays out its children."""

    VSTACK = "VSTACK"
    HSTACK = "HSTACK"


class ViewPossibleEvent(Enum):
    """Events a view can attach a handler to."""

    IDLE = "idle"
    CLICK = "click"
    APPEAR = "appear"
    DISAPPEAR = "disappear"


@dataclass(frozen=True)
class NoClick:
    """No click happened during this frame."""


@dataclass(frozen=True)
class ClickedAt:
    """A click at the given coordinates."""

    x: int
    y: int


@dataclass(frozen=True)
class ViewEvent:
    """The input a view tree reacts to."""

    clicked: Union[NoClick, ClickedAt] = field(default_factory=NoClick)


@dataclass
class BoundingBox:
    """Position and optional size of a view."""

    x: int = 0
    y: int = 0
    width: Optional[int] = None
    height: Optional[int] = None
    relative: bool = False

    def contains(self, point: tuple[int, int]) -> bool:
        """Whether the point lies in the box; hit testing is not enforced yet."""
        return True

    def is_valid(self) -> bool:
        """Both width and height are known."""
        return self.width is not None and self.height is not None

    def is_valid_along(self, view_type: ViewType) -> bool:
        """The size along the given stack axis is known."""
        if view_type is ViewType.VSTACK:
            return self.height is not None
        return self.width is not None


class _DecodeError(Exception):
    pass


def _field_type(f: dataclasses.Field) -> Any:
    """The declared type of a field, resolving plain names where possible."""
    declared = f.type
    if not isinstance(declared, str):
        return declared
    name = declared.strip()
    if name in _NAMED_TYPES:
        return _NAMED_TYPES[name]
    factory = f.default_factory
    if isinstance(factory, type) and factory.__name__ == name:
        return factory
    if f.default is not dataclasses.MISSING and type(f.default).__name__ == name:
        return type(f.default)
    return Any


def _decode(value: Any, tp: Any) -> Any:
    if tp is Any or tp is None:
        return value
    if dataclasses.is_dataclass(tp) and isinstance(tp, type):
        if not isinstance(value, dict):
            raise _DecodeError(f"expected an object for {tp.__name__}")
        kwargs = {}
        for f in dataclasses.fields(tp):
            if not f.init:
                continue
            if f.name not in value:
                raise _DecodeError(f"missing field {f.name!r}")
            kwargs[f.name] = _decode(value[f.name], _field_type(f))
        return tp(**kwargs)
    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin is Union or (hasattr(types, "UnionType") and origin is types.UnionType):
        if value is None and type(None) in args:
            return None
        for arg in args:
            if arg is type(None):
                continue
            try:
                return _decode(value, arg)
            except _DecodeError:
                continue
        raise _DecodeError(f"no variant of {tp} matches")
    if origin is list:
        if not isinstance(value, list):
            raise _DecodeError("expected a list")
        item = args[0] if args else Any
        return [_decode(v, item) for v in value]
    if origin is dict:
        if not isinstance(value, dict):
            raise _DecodeError("expected an object")
        item = args[1] if len(args) == 2 else Any
        return {k: _decode(v, item) for k, v in value.items()}
    if tp is bool:
        if not isinstance(value, bool):
            raise _DecodeError("expected a boolean")
        return value
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _DecodeError("expected an integer")
        return value
    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _DecodeError("expected a number")
        return float(value)
    if tp is str:
        if not isinstance(value, str):
            raise _DecodeError("expected a string")
        return value
    return value


def state_to_value(state: Any) -> JsonValue:
    """Turn a state object into a JSON-like value."""
    if dataclasses.is_dataclass(state) and not isinstance(state, type):
        return dataclasses.asdict(state)
    return state


def state_from_value(value: JsonValue, state_type: Optional[type]) -> Any:
    """Rebuild a state of ``state_type`` from a value, or its default if it does not fit."""
    if state_type is None:
        return value
    try:
        return _decode(value, state_type)
    except (_DecodeError, TypeError):
        return state_type()


def convert(function: Handler, state_type: Optional[type]) -> Callable[[JsonValue], JsonValue]:
    """Wrap a typed state handler into one over JSON-like values."""

    def wrapped(value: JsonValue) -> JsonValue:
        return state_to_value(function(state_from_value(value, state_type)))

    return wrapped


def _trunc_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("no child is left to take the remaining space")
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _option(value: Optional[int]) -> str:
    return "None" if value is None else f"Some({value})"


@dataclass(eq=False)
class View:
    """A stack of child views with event handlers and a bounding box.

    A view with a ``state_type`` holds handlers over that type; a view whose
    ``state_type`` is ``None`` is erased and its handlers work on JSON-like values.
    """

    view_type: ViewType = ViewType.VSTACK
    state_type: Optional[type] = None
    children: list[View] = field(default_factory=list)
    id: str = ""
    handlers: dict[ViewPossibleEvent, Handler] = field(default_factory=dict)
    bounding_box: BoundingBox = field(default_factory=BoundingBox)

    @classmethod
    def empty(cls, view_type: ViewType, state_type: Optional[type] = None) -> View:
        """A view of the given kind with no children and no handlers."""
        return cls(view_type=view_type, state_type=state_type)

    @property
    def erased(self) -> bool:
        return self.state_type is None

    def on(self, event: ViewPossibleEvent, handler: Handler) -> View:
        """Attach a handler for an event, replacing any earlier one."""
        self.handlers[event] = handler
        return self

    def set_width(self, width: int) -> View:
        self.bounding_box.width = width
        return self

    def set_height(self, height: int) -> View:
        self.bounding_box.height = height
        return self

    def set_relative(self, relative: bool) -> View:
        self.bounding_box.relative = relative
        return self

    def _require(self, value: Optional[int], name: str) -> int:
        if value is None:
            raise ValueError(f"{name} of the view is not set")
        return value

    def main_dimension(self) -> int:
        """Size along this view's own stacking axis."""
        if self.view_type is ViewType.VSTACK:
            return self._require(self.bounding_box.height, "height")
        return self._require(self.bounding_box.width, "width")

    def cross_dimension(self) -> int:
        """Size across this view's own stacking axis."""
        if self.view_type is not ViewType.VSTACK:
            return self._require(self.bounding_box.height, "height")
        return self._require(self.bounding_box.width, "width")

    def with_dimension(self, length: int, view_type: ViewType, cross_length: int) -> View:
        """Fill in any missing size as laid out by a parent of ``view_type``."""
        box = self.bounding_box
        if view_type is ViewType.VSTACK:
            if box.height is None:
                box.height = length
            if box.width is None:
                box.width = cross_length
        else:
            if box.height is None:
                box.height = cross_length
            if box.width is None:
                box.width = length
        return self

    def set_bounding_boxes(self) -> View:
        """Share this view's size out between its children, recursively."""
        if not self.bounding_box.is_valid():
            raise ValueError(
                "Bounding box must be set to valid. please add .set_width() and .set_height() modifiers"
            )
        if not self.children:
            return self
        total = self.main_dimension()
        fixed = [
            child.main_dimension()
            for child in self.children
            if child.bounding_box.is_valid_along(self.view_type)
        ]
        share = _trunc_div(total - sum(fixed), len(self.children) - len(fixed))
        cross = self.cross_dimension()
        self.children = [
            child.with_dimension(share, self.view_type, cross).set_bounding_boxes()
            for child in self.children
        ]
        return self

    def erase(self) -> View:
        """A view over JSON-like state with the same layout and behaviour."""
        if self.erased:
            return self
        return View(
            view_type=self.view_type,
            state_type=None,
            children=[child.erase() for child in self.children],
            id=self.id,
            handlers={
                event: convert(handler, self.state_type)
                for event, handler in self.handlers.items()
            },
            bounding_box=self.bounding_box,
        )

    def _apply_click(self, state: Any, point: tuple[int, int]) -> Any:
        handler = self.handlers.get(ViewPossibleEvent.CLICK)
        if handler is not None and self.bounding_box.contains(point):
            return handler(state)
        return state

    def with_event(self, state: Any, event: ViewEvent) -> tuple[Any, View]:
        """Run the handlers a click reaches and return the resulting state.

        Erased views pass the click on to their children; typed views handle
        it themselves only.
        """
        clicked = event.clicked
        if not isinstance(clicked, ClickedAt):
            return state, self
        point = (clicked.x, clicked.y)
        if not self.bounding_box.contains(point):
            return state, self
        state = self._apply_click(state, point)
        if self.erased:
            new_children = []
            for child in self.children:
                state, child = child.with_event(state, event)
                new_children.append(child)
            self.children = new_children
        return state, self

    def render(self, color: bool = True) -> str:
        """A text outline of the view tree, optionally with terminal colours."""
        name = self.view_type.name
        width = _option(self.bounding_box.width)
        height = _option(self.bounding_box.height)
        if color:
            name = f"{_BOLD_BRIGHT_BLUE}{name}{_RESET}"
            width = f"{_RED}{width}{_RESET}"
            height = f"{_RED}{height}{_RESET}"
        parts = [f"{name}[w: {width}, h: {height}]\n"]
        for child in self.children:
            parts.extend(f"\t{line}\n" for line in child.render(color).split("\n"))
        return "".join(parts)

    def __str__(self) -> str:
        return self.render(color=True)