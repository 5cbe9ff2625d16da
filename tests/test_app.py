from stackui.app import App, AppState, Other, OtherState, main
from stackui.views import ClickedAt, ViewEvent, ViewPossibleEvent


def test_app_view_is_unsized_stack_of_two():
    view = App().draw_view(ViewEvent(), (100, 100))
    assert len(view.children) == 2
    assert view.bounding_box.width is None
    assert view.state_type is None


def test_app_click_handler_is_last_registered():
    view = App().draw_view(ViewEvent(), (100, 100))
    handler = view.children[0].handlers[ViewPossibleEvent.CLICK]
    assert handler({"x": 5, "y": "a"}) == {"x": 5, "y": "a"}
    assert ViewPossibleEvent.CLICK not in view.children[1].handlers


def test_other_root_line_and_size():
    view = Other().draw_view(ViewEvent(), (100, 100))
    first_line = view.render(color=False).split("\n")[0]
    assert first_line == "VSTACK[w: Some(100), h: Some(100)]"


def test_other_children_share_height_evenly():
    view = Other().draw_view(ViewEvent(), (100, 100))
    heights = [c.bounding_box.height for c in view.children]
    assert len(set(heights)) == 1
    assert sum(heights) <= 100
    assert all(c.bounding_box.width == 100 for c in view.children)


def test_embedded_app_children_laid_out():
    view = Other().draw_view(ViewEvent(), (60, 90))
    embedded = view.children[2]
    assert len(embedded.children) == 2
    assert all(c.bounding_box.is_valid() for c in embedded.children)
    assert sum(c.bounding_box.height for c in embedded.children) <= embedded.bounding_box.height


def test_draw_view_resets_state():
    widget = Other(OtherState(x=3, y="b", app=AppState(2, "c")))
    widget.draw_view(ViewEvent(), (10, 10))
    assert widget.state == OtherState()


def test_main_prints_outline(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("VSTACK") == 6