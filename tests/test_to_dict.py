from dataclasses import dataclass

import pytest

from stackui.to_dict import to_dict


@dataclass
class Point:
    x: int
    name: str
    visible: bool = False


def test_fields_mapped_to_text():
    result = to_dict(Point(3, "origin"))
    assert result["x"] == ("3", "")
    assert result["name"] == ("origin", "")


def test_keys_follow_field_order():
    assert list(to_dict(Point(1, "a"))) == ["x", "name", "visible"]


def test_bool_text():
    assert to_dict(Point(0, "", True))["visible"] == ("true", "")


def test_second_element_always_empty():
    assert all(note == "" for _, note in to_dict(Point(5, "b")).values())


def test_non_dataclass_rejected():
    with pytest.raises(TypeError):
        to_dict({"x": 1})


def test_dataclass_type_rejected():
    with pytest.raises(TypeError):
        to_dict(Point)