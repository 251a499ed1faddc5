"""Tests for the category axis."""

from barsvg.config import Orientation
from barsvg.render.category_axis import CategoryAxis


def test_labels_are_fields_in_order():
    axis = CategoryAxis(["Jan", "Feb", "Mar"])
    assert axis.labels() == ["Jan", "Feb", "Mar"]


def test_vertical_offset_is_positive_half_slot():
    assert CategoryAxis(["Jan"], Orientation.VERTICAL).label_offset(80) == 40


def test_horizontal_offset_is_negative_half_slot():
    assert CategoryAxis(["Jan"], Orientation.HORIZONTAL).label_offset(80) == -40
