"""Sample widgets and the command that draws them."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Optional, Sequence

from stackui.views import NoClick, ViewEvent, ViewPossibleEvent
from stackui.vstack import vstack
from stackui.widgets import ErasedDrawView, Widget, convert_drawview


@dataclass
class AppState:
    x: int = 0
    y: str = ""


@dataclass
class OtherState:
    x: int = 0
    y: str = ""
    app: AppState = field(default_factory=AppState)


def _set_x(state):
    state.x = 1
    return state


def _same(state):
    return state


def _draw_app(state, event, rect):
    view = vstack(
        [
            vstack([], AppState)
            .on(ViewPossibleEvent.CLICK, _set_x)
            .on(ViewPossibleEvent.CLICK, _same),
            vstack([], AppState),
        ],
        AppState,
    )
    return state, view


def _draw_other(state, event, rect):
    view = (
        vstack(
            [
                vstack([], OtherState)
                .on(ViewPossibleEvent.CLICK, _set_x)
                .on(ViewPossibleEvent.CLICK, _same),
                vstack([], OtherState),
                App().draw_view(event, rect),
            ],
            OtherState,
        )
        .set_width(rect[0])
        .set_height(rect[1])
        .set_bounding_boxes()
    )
    return state, view


class App(Widget):
    """A stack of two empty stacks."""

    state_type = AppState

    def draw(self) -> ErasedDrawView:
        return convert_drawview(_draw_app, AppState)


class Other(Widget):
    """A sized stack holding two empty stacks and an embedded App."""

    state_type = OtherState

    def draw(self) -> ErasedDrawView:
        return convert_drawview(_draw_other, OtherState)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Draw the sample widget tree once and print its outline."""
    parser = argparse.ArgumentParser(prog="stackui", description=main.__doc__)
    parser.parse_args(argv)
    widget = Other()
    for _ in range(1, 2):
        view = widget.draw_view(ViewEvent(NoClick()), (100, 100))
        print(view)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())