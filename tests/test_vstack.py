from __future__ import annotations

from dataclasses import dataclass

from stackui.views import ClickedAt, View, ViewEvent, ViewPossibleEvent, ViewType
from stackui.vstack import vstack


@dataclass
class Counter:
    x: int = 0


def test_vstack_is_vertical_and_empty():
    view = vstack([])
    assert view.view_type is ViewType.VSTACK
    assert view.children == []
    assert not view.bounding_box.is_valid()


def test_vstack_keeps_order_and_state_type():
    first = View.empty(ViewType.HSTACK)
    second = View.empty(ViewType.VSTACK)
    view = vstack([first, second], Counter)
    assert view.children[0] is first
    assert view.children[1] is second
    assert view.state_type is Counter


def test_vstack_copies_child_list():
    children = [View.empty(ViewType.VSTACK)]
    view = vstack(children)
    children.append(View.empty(ViewType.VSTACK))
    assert len(view.children) == 1


def test_vstack_accepts_generator():
    view = vstack(View.empty(ViewType.VSTACK) for _ in range(3))
    assert len(view.children) == 3


def test_vstack_layout_fills_children():
    view = vstack([vstack([]), vstack([])]).set_width(100).set_height(100).set_bounding_boxes()
    assert sum(c.bounding_box.height for c in view.children) == 100
    assert all(c.bounding_box.width == 100 for c in view.children)


def test_vstack_with_erased_child_handles_click():
    def bump(state: Counter) -> Counter:
        return Counter(x=state.x + 1)

    inner = vstack([], Counter).on(ViewPossibleEvent.CLICK, bump)
    outer = vstack([inner.erase()], Counter).erase()
    state, _ = outer.with_event({"x": 0}, ViewEvent(ClickedAt(1, 1)))
    assert state == {"x": 1}