"""Authorization credential."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AUTH_SCHEME


@dataclass(frozen=True)
class AuthToken:
    """Token used to authorize access to the GitHub API.

    Serialized into the ``Authorization`` header as ``token <value>``.
    The raw value is kept out of ``repr`` so tokens do not leak into logs.
    """

    value: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("AuthToken value must be a non-empty string")

    @property
    def header_value(self) -> str:
        return f"{AUTH_SCHEME} {self.value}"

    @classmethod
    def coerce(cls, token: AuthToken | str | None) -> AuthToken | None:
        """Accept a plain string wherever a token is expected."""
        if token is None or isinstance(token, AuthToken):
            return token
        return cls(token)
