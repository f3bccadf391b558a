"""Unit tests for core enums."""

from laakhay.github.core import PaginationState, ParamLocation, Shape


def test_shape_values():
    """Test Shape enum values."""
    assert Shape.SINGLE.value == "single"
    assert Shape.PAGINATED.value == "paginated"
    assert len(Shape) == 2


def test_shape_is_paginated():
    assert Shape.PAGINATED.is_paginated is True
    assert Shape.SINGLE.is_paginated is False


def test_shape_from_value():
    assert Shape("paginated") is Shape.PAGINATED


def test_param_location_values():
    """Test ParamLocation enum values."""
    assert {loc.value for loc in ParamLocation} == {"path", "query", "body"}


# PaginationState tests
def test_pagination_state_values():
    assert PaginationState.START.value == "start"
    assert PaginationState.DONE.value == "done"
    assert PaginationState.FAILED.value == "failed"
