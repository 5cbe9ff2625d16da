"""Builder for vertical stacks."""

from __future__ import annotations

from typing import Iterable, Optional

from stackui.views import View, ViewType


def vstack(children: Iterable[View], state_type: Optional[type] = None) -> View:
    """A vertical stack holding the given children in order."""
    view = View.empty(ViewType.VSTACK, state_type)
    view.children = list(children)
    return view