"""Unit tests for Link header parsing."""

from __future__ import annotations

from laakhay.github.runtime.links import ContinuationSet, Link, has_next, parse_link_header

GITHUB_LINKS = (
    '<https://api.github.com/user/repos?page=3&per_page=100>; rel="next", '
    '<https://api.github.com/user/repos?page=50&per_page=100>; rel="last", '
    '<https://api.github.com/user/repos?page=1&per_page=100>; rel="first", '
    '<https://api.github.com/user/repos?page=1&per_page=100>; rel="prev"'
)


class TestParseLinkHeader:
    """Test parse_link_header."""

    def test_single_next_entry(self):
        """A single next entry yields one link with relation next."""
        links = parse_link_header('<https://api.example/x?page=2>; rel="next"')

        assert len(links) == 1
        assert links[0].url == "https://api.example/x?page=2"
        assert links[0].rels == ("next",)
        assert links.has_next
        assert has_next(links)

    def test_garbage_yields_empty_set(self):
        """Unparseable input is skipped without raising."""
        links = parse_link_header("garbage, also garbage")

        assert len(links) == 0
        assert not has_next(links)

    def test_github_header_keeps_order(self):
        """Entries keep header order and are reachable by relation."""
        links = parse_link_header(GITHUB_LINKS)

        assert [link.rels[0] for link in links] == ["next", "last", "first", "prev"]
        assert links.get("last").page == 50
        assert links.get("next").page == 3
        assert links.pairs[0] == ("next", "https://api.github.com/user/repos?page=3&per_page=100")

    def test_empty_and_none(self):
        """Missing header values parse to an empty set."""
        assert len(parse_link_header(None)) == 0
        assert len(parse_link_header("")) == 0
        assert not has_next(None)

    def test_malformed_entries_are_skipped(self):
        """Only the well-formed entries survive."""
        header = (
            'https://no-brackets?page=2; rel="next", '
            '<https://api.example/x?page=9>; rel="last", '
            "<https://api.example/x?page=4>, "
            '<>; rel="next", '
            '<https://api.example/x?page=5>; title="no relation"'
        )
        links = parse_link_header(header)

        assert len(links) == 1
        assert links[0].rels == ("last",)
        assert not links.has_next

    def test_comma_inside_url_and_quotes(self):
        """Commas inside <...> or quoted values do not split entries."""
        header = (
            '<https://api.example/x?labels=a,b&page=2>; rel="next"; title="one, two", '
            '<https://api.example/x?page=7>; rel="last"'
        )
        links = parse_link_header(header)

        assert len(links) == 2
        assert links[0].url == "https://api.example/x?labels=a,b&page=2"
        assert links[0].param("title") == "one, two"
        assert links[1].page == 7

    def test_stray_quote_does_not_hide_later_entries(self):
        """An unterminated quote is confined to its own entry."""
        links = parse_link_header('garbage", <https://api.example/x?page=2>; rel="next"')

        assert links.pairs == (("next", "https://api.example/x?page=2"),)
        assert links.has_next

    def test_unterminated_quoted_param_before_next(self):
        header = (
            '<https://api.example/x?page=9>; title="oops, '
            '<https://api.example/x?page=2>; rel="next"'
        )
        links = parse_link_header(header)

        assert len(links) == 1
        assert links.get("next").page == 2

    def test_bare_and_multi_valued_rel(self):
        """Unquoted rel values and space-separated relations are accepted."""
        links = parse_link_header(
            "<https://api.example/x?page=2>; REL=next, "
            '<https://api.example/x?page=3>; rel="last alternate"'
        )

        assert links[0].rels == ("next",)
        assert links.get("alternate") is links[1]
        assert links.get("last") is links[1]
        assert links.has_next

    def test_extra_params_without_value(self):
        """Parameters without a value are kept with an empty string."""
        links = parse_link_header('<https://api.example/x>; rel="next"; crossorigin')

        assert links[0].param("crossorigin") == ""
        assert links[0].page is None


class TestContinuationSet:
    """Test ContinuationSet helpers."""

    def test_get_missing_relation(self):
        links = ContinuationSet(links=(Link(url="https://a", params=(("rel", "prev"),)),))

        assert links.get("next") is None
        assert not links.has_next

    def test_non_numeric_page(self):
        link = Link(url="https://api.example/x?page=abc", params=(("rel", "next"),))

        assert link.page is None

    def test_iteration(self):
        links = parse_link_header(GITHUB_LINKS)

        assert [link.page for link in links] == [3, 50, 1, 1]
