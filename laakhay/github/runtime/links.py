"""Link response header parsing.

GitHub announces further pages of a list result through a ``Link`` header::

    <https://api.github.com/user/repos?page=2>; rel="next",
    <https://api.github.com/user/repos?page=5>; rel="last"

The header is advisory metadata: parsing is lenient, malformed entries are
skipped and a header that cannot be read at all yields an empty set.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from urllib.parse import parse_qs, urlsplit

NEXT = "next"

# Every entry opens with "<"; a stray quote or bracket stays inside its own entry
_ENTRY_BOUNDARY = re.compile(r",\s*(?=<)")


@dataclass(frozen=True)
class Link:
    """One ``<url>; key=value`` entry of a Link header.

    Attributes:
        url: Target URL between the angle brackets
        params: Ordered (key, value) parameters; keys are lower-cased
    """

    url: str
    params: tuple[tuple[str, str], ...] = ()

    def param(self, key: str) -> str | None:
        key = key.lower()
        for k, v in self.params:
            if k == key:
                return v
        return None

    @property
    def rels(self) -> tuple[str, ...]:
        """Relation names; ``rel="next last"`` names two relations."""
        rel = self.param("rel")
        return tuple(rel.split()) if rel else ()

    @property
    def page(self) -> int | None:
        """Value of the ``page`` query parameter of the target, if numeric."""
        values = parse_qs(urlsplit(self.url).query).get("page")
        if not values:
            return None
        try:
            return int(values[0])
        except ValueError:
            return None


@dataclass(frozen=True)
class ContinuationSet:
    """Ordered set of links parsed from one response."""

    links: tuple[Link, ...] = ()

    def __iter__(self) -> Iterator[Link]:
        return iter(self.links)

    def __len__(self) -> int:
        return len(self.links)

    def __getitem__(self, index: int) -> Link:
        return self.links[index]

    @property
    def pairs(self) -> tuple[tuple[str, str], ...]:
        """(relation, url) pairs in header order."""
        return tuple((rel, link.url) for link in self.links for rel in link.rels)

    def get(self, rel: str) -> Link | None:
        """Return the first link carrying the given relation."""
        for link in self.links:
            if rel in link.rels:
                return link
        return None

    @property
    def has_next(self) -> bool:
        return self.get(NEXT) is not None


def _split_outside(text: str, sep: str) -> list[str]:
    """Split on ``sep`` except inside ``<...>`` or double quotes."""
    parts: list[str] = []
    buf: list[str] = []
    in_url = False
    in_quote = False
    for ch in text:
        if ch == '"' and not in_url:
            in_quote = not in_quote
        elif ch == "<" and not in_quote:
            in_url = True
        elif ch == ">" and not in_quote:
            in_url = False
        elif ch == sep and not in_url and not in_quote:
            parts.append("".join(buf))
            buf = []
            continue
        buf.append(ch)
    parts.append("".join(buf))
    return parts


def _parse_entry(entry: str) -> Link | None:
    entry = entry.strip()
    if not entry.startswith("<"):
        return None
    end = entry.find(">")
    if end <= 1:
        return None
    url = entry[1:end].strip()
    rest = entry[end + 1 :].strip()
    if not url or not rest.startswith(";"):
        return None

    params: list[tuple[str, str]] = []
    for raw in _split_outside(rest[1:], ";"):
        raw = raw.strip()
        if not raw:
            continue
        key, _, value = raw.partition("=")
        key = key.strip().lower()
        if not key:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        params.append((key, value))

    link = Link(url=url, params=tuple(params))
    # An entry that names no relation cannot drive pagination
    if not link.rels:
        return None
    return link


def parse_link_header(value: str | None) -> ContinuationSet:
    """Parse a Link header value into a ContinuationSet.

    Args:
        value: Raw header value (may be None or empty)

    Returns:
        ContinuationSet with the well-formed entries in header order
    """
    if not value:
        return ContinuationSet()
    links = []
    for chunk in _ENTRY_BOUNDARY.split(value):
        for entry in _split_outside(chunk, ","):
            link = _parse_entry(entry)
            if link is not None:
                links.append(link)
    return ContinuationSet(links=tuple(links))


def has_next(links: ContinuationSet | None) -> bool:
    """True iff the set contains a ``next`` relation."""
    return links is not None and links.has_next
