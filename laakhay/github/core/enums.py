"""Core enumerations shared by the runtime and the endpoint catalog.

Key Types:
    - Shape: terminal shape of an endpoint (single resource or paginated list)
    - ParamLocation: where a declared parameter is placed in the request
    - PaginationState: states of the page accumulation loop
"""

from enum import Enum


class Shape(str, Enum):
    """Terminal shape of an endpoint once all parameters are bound.

    This is a closed variant: the executor and the accumulator branch on it
    and there is no third case.
    """

    SINGLE = "single"
    PAGINATED = "paginated"

    @property
    def is_paginated(self) -> bool:
        return self is Shape.PAGINATED


class ParamLocation(str, Enum):
    """Request component a declared parameter is rendered into."""

    PATH = "path"
    QUERY = "query"
    BODY = "body"


class PaginationState(str, Enum):
    """States of the pagination accumulator."""

    START = "start"
    FETCHING = "fetching"
    CONTINUING = "continuing"
    DONE = "done"
    FAILED = "failed"
