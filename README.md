# stackui

Build trees of stacked views, share a fixed rectangle out between them, and
let click events run handlers that turn one state into the next.

## Install

    pip install .

For the tests:

    pip install .[test]
    pytest

## Views (`stackui.views`)

A `View` is a vertical or horizontal stack (`ViewType.VSTACK` or
`ViewType.HSTACK`) with a `BoundingBox`, a list of child views and handlers
keyed by `ViewPossibleEvent` (`IDLE`, `CLICK`, `APPEAR`, `DISAPPEAR`).
`stackui.vstack.vstack(children, state_type)` builds a vertical stack from its
children:

```python
from stackui.vstack import vstack

root = (
    vstack([vstack([], dict), vstack([], dict)], dict)
    .set_width(100)
    .set_height(100)
    .set_bounding_boxes()
)
print(root.render(color=False))
```

prints

```
VSTACK[w: Some(100), h: Some(100)]
	VSTACK[w: Some(100), h: Some(50)]
	
	VSTACK[w: Some(100), h: Some(50)]
	
```

Layout:

- `set_width`, `set_height` and `set_relative` set fields of the bounding box
  and return the view, so they chain.
- `set_bounding_boxes()` raises `ValueError` unless both width and height are
  set. It subtracts the sizes of children already sized along the stack axis,
  divides the rest evenly (truncating) between the other children, fills in
  each child's missing sizes with `with_dimension` (the cross size is the
  parent's), and recurses. If every child is already sized along the axis, it
  raises `ZeroDivisionError`.
- `main_dimension()` and `cross_dimension()` return the size along and across
  the view's own axis, raising `ValueError` if it is not set.

Events:

- `on(event, handler)` attaches a handler that takes a state and returns the
  new one; a second handler for the same event replaces the first.
- `with_event(state, event)` does nothing unless `event.clicked` is a
  `ClickedAt`. Otherwise it runs the view's `CLICK` handler. A view whose
  `state_type` is `None` (an erased view) then passes the click on to its
  children in order; a typed view does not.
- `BoundingBox.contains` always returns `True`: clicks are not hit-tested
  against positions.

State conversion:

- `erase()` returns a view with `state_type` `None` whose handlers work on
  JSON-like values, wrapping each handler with `convert(handler, state_type)`.
- `state_to_value` turns a dataclass into a dict; `state_from_value` rebuilds
  a dataclass (or other type) from such a value and falls back to
  `state_type()` when the value does not fit.

`render(color=True)` returns the outline of the tree, with ANSI colours when
`color` is true; `str(view)` is the coloured form.

## Widgets (`stackui.widgets`)

Subclass `Widget`, set the class attribute `state_type`, and give it a
`draw()` method returning a draw function over JSON-like state, usually made
with `convert_drawview(function, state_type)`. The typed function takes
`(state, event, rect)` and returns `(state, view)`.

`Widget.draw_view(event, rect)` takes the widget's state with `take_state()`
(leaving a default state behind), draws it and returns the erased view. It does
not run the view's handlers and does not store a new state; use
`View.with_event` and `set_state` for that.

## `to_dict` (`stackui.to_dict`)

`to_dict(obj)` maps each field of a dataclass instance to a pair of its text
form and an empty string; booleans read `true`/`false`. Anything else raises
`TypeError`.

## Command

    stackui

draws the sample `Other` widget from `stackui.app` (two empty stacks and an
embedded `App`) in a 100 by 100 rectangle and prints the coloured outline of
the view tree.

## What it does not do

Nothing is drawn to a screen and there is no event loop or input handling:
views exist as trees in memory and as text outlines only. Positions (`x`, `y`)
of bounding boxes are never computed, and only vertical stacks have a builder.