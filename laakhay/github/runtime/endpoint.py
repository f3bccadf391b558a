"""Endpoint descriptors and argument binding.

Architecture:
    An EndpointSpec declares one API operation: method, path template,
    ordered parameters and a terminal Shape. Binding arguments is recursive
    partial application: each applied argument consumes the leftmost
    remaining parameter and yields a PartialEndpoint of one-lower arity;
    once nothing remains an Action is exposed. No arity is hard-coded.

Design Decisions:
    - Frozen dataclasses: specs are catalog configuration and never mutate
    - Construction-time checks: argument count and type mismatches raise
      ConstructionError before any request is built
    - Optional parameters accept None and are left out of the request
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Any

from ..core.enums import ParamLocation, Shape
from ..core.exceptions import ConstructionError


@dataclass(frozen=True)
class Param:
    """Declared endpoint parameter.

    Attributes:
        name: Parameter name (path placeholder, query key or body key)
        location: Where the value is rendered
        accepts: Accepted python type(s) for the value
        required: If False, None is accepted and the parameter is omitted
        safe: Characters left unquoted when rendered into the path
    """

    name: str
    location: ParamLocation = ParamLocation.PATH
    accepts: type | tuple[type, ...] = str
    required: bool = True
    safe: str = ""

    def check(self, value: Any, endpoint_id: str) -> None:
        if value is None:
            if self.required:
                raise ConstructionError(
                    f"{endpoint_id}: parameter '{self.name}' is required", endpoint_id
                )
            return
        # bool is an int subclass; do not let True pass for an int id
        if isinstance(value, bool) and not _accepts_bool(self.accepts):
            raise ConstructionError(
                f"{endpoint_id}: parameter '{self.name}' expects "
                f"{_type_name(self.accepts)}, got bool",
                endpoint_id,
            )
        if not isinstance(value, self.accepts):
            raise ConstructionError(
                f"{endpoint_id}: parameter '{self.name}' expects "
                f"{_type_name(self.accepts)}, got {type(value).__name__}",
                endpoint_id,
            )


def path_param(name: str, accepts: type | tuple[type, ...] = str, *, safe: str = "") -> Param:
    return Param(name, ParamLocation.PATH, accepts, required=True, safe=safe)


def query_param(
    name: str, accepts: type | tuple[type, ...] = str, *, required: bool = False
) -> Param:
    return Param(name, ParamLocation.QUERY, accepts, required=required)


def body_param(
    name: str, accepts: type | tuple[type, ...] = str, *, required: bool = True
) -> Param:
    return Param(name, ParamLocation.BODY, accepts, required=required)


def _accepts_bool(t: type | tuple[type, ...]) -> bool:
    types = t if isinstance(t, tuple) else (t,)
    return bool in types or object in types


def _type_name(t: type | tuple[type, ...]) -> str:
    if isinstance(t, tuple):
        return " | ".join(x.__name__ for x in t)
    return t.__name__


@dataclass(frozen=True)
class EndpointSpec:
    """Declarative description of one API operation.

    Attributes:
        id: Endpoint identifier used in logs and the catalog registry
        method: HTTP method
        path: Path template with ``{name}`` placeholders for PATH params
        shape: Terminal shape (single resource or paginated list)
        params: Ordered declared parameters; arguments bind left to right
        model: Payload type used to decode the body (None returns raw JSON)
    """

    id: str
    method: str
    path: str
    shape: Shape
    params: tuple[Param, ...] = ()
    model: Any = None

    def __post_init__(self) -> None:
        names = [p.name for p in self.params]
        if len(set(names)) != len(names):
            raise ConstructionError(f"{self.id}: duplicate parameter names", self.id)
        placeholders = {
            fname for _, fname, _, _ in string.Formatter().parse(self.path) if fname
        }
        declared = {p.name for p in self.params if p.location is ParamLocation.PATH}
        if placeholders != declared:
            raise ConstructionError(
                f"{self.id}: path placeholders {sorted(placeholders)} do not match "
                f"path parameters {sorted(declared)}",
                self.id,
            )

    @property
    def arity(self) -> int:
        return len(self.params)

    def start(self) -> PartialEndpoint | Action:
        """Entry point of binding: nothing applied yet."""
        if not self.params:
            return Action(endpoint=self)
        return PartialEndpoint(endpoint=self)


@dataclass(frozen=True)
class Action:
    """Fully bound endpoint, ready for the executor."""

    endpoint: EndpointSpec
    arguments: dict[str, Any] = field(default_factory=dict)

    @property
    def shape(self) -> Shape:
        return self.endpoint.shape

    @property
    def id(self) -> str:
        return self.endpoint.id

    def values(self, location: ParamLocation) -> dict[str, Any]:
        """Non-None argument values for one location, in declaration order."""
        return {
            p.name: self.arguments[p.name]
            for p in self.endpoint.params
            if p.location is location and self.arguments.get(p.name) is not None
        }


@dataclass(frozen=True)
class PartialEndpoint:
    """Endpoint with a left prefix of its parameters applied."""

    endpoint: EndpointSpec
    applied: tuple[Any, ...] = ()

    @property
    def remaining(self) -> tuple[Param, ...]:
        return self.endpoint.params[len(self.applied) :]

    @property
    def arity(self) -> int:
        return len(self.remaining)

    def apply(self, arg: Any) -> PartialEndpoint | Action:
        """Consume one argument for the leftmost remaining parameter."""
        param = self.remaining[0]
        param.check(arg, self.endpoint.id)
        applied = (*self.applied, arg)
        if len(applied) < self.endpoint.arity:
            return PartialEndpoint(endpoint=self.endpoint, applied=applied)
        arguments = {p.name: v for p, v in zip(self.endpoint.params, applied, strict=True)}
        return Action(endpoint=self.endpoint, arguments=arguments)

    def __call__(self, *args: Any) -> PartialEndpoint | Action:
        """Apply several arguments; stops at the terminal Action."""
        return _apply_all(self, args, self.endpoint.id, exact=False)


def _apply_all(
    target: PartialEndpoint | Action, args: tuple[Any, ...], endpoint_id: str, *, exact: bool
) -> PartialEndpoint | Action:
    if not args:
        if exact and isinstance(target, PartialEndpoint):
            missing = ", ".join(p.name for p in target.remaining)
            raise ConstructionError(f"{endpoint_id}: missing arguments: {missing}", endpoint_id)
        return target
    if isinstance(target, Action):
        raise ConstructionError(
            f"{endpoint_id}: {len(args)} unexpected extra argument(s)", endpoint_id
        )
    head, *tail = args
    return _apply_all(target.apply(head), tuple(tail), endpoint_id, exact=exact)


def bind(endpoint: EndpointSpec, *args: Any) -> Action:
    """Bind all declared parameters of an endpoint.

    Args:
        endpoint: Endpoint descriptor
        *args: One value per declared parameter, in order

    Returns:
        Terminal Action of the endpoint's shape

    Raises:
        ConstructionError: Too few or too many arguments, or a type mismatch
    """
    action = _apply_all(endpoint.start(), args, endpoint.id, exact=True)
    if not isinstance(action, Action):
        raise ConstructionError(f"{endpoint.id}: binding did not complete", endpoint.id)
    return action
