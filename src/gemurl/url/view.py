"""Span and URL view types over a source string.

A UrlView never copies the text it describes. Each component is a half-open
Span of offsets into the original string; an empty span means the component
is absent. The one exception is a bare "?" or "#": the query or fragment is
then present but empty, and its span still points just past the delimiter.
Python strings are immutable, so a view can safely outlive the call that
produced it.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Span:
    """A half-open [start, end) range of character offsets.

    Attributes:
        start: Offset of the first character (inclusive)
        end: Offset past the last character (exclusive)
    """
    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        """True if the span covers no characters (component absent)."""
        return self.end <= self.start

    def __len__(self) -> int:
        return max(self.end - self.start, 0)

    def of(self, source: str) -> str:
        """Slice the spanned text out of source.

        Example:
            >>> Span(2, 5).of("xxabcyy")
            'abc'
        """
        if self.is_empty:
            return ""
        return source[self.start:self.end]


EMPTY_SPAN = Span(0, 0)


@dataclass(frozen=True)
class UrlView:
    """Parsed components of a URL, as spans over `source`.

    When non-empty, spans are ordered scheme <= host <= port <= path <= query
    <= fragment and never overlap. Query and fragment exclude their `?` and
    `#` delimiters; when present they always start after that delimiter, so
    a present but empty query or fragment is a zero-length span that is not
    EMPTY_SPAN. Bracketed IPv6 hosts keep their brackets.
    """
    source: str
    scheme: Span = EMPTY_SPAN
    host: Span = EMPTY_SPAN
    port: Span = EMPTY_SPAN
    path: Span = EMPTY_SPAN
    query: Span = EMPTY_SPAN
    fragment: Span = EMPTY_SPAN

    @property
    def scheme_text(self) -> str:
        return self.scheme.of(self.source)

    @property
    def host_text(self) -> str:
        return self.host.of(self.source)

    @property
    def port_text(self) -> str:
        return self.port.of(self.source)

    @property
    def path_text(self) -> str:
        return self.path.of(self.source)

    @property
    def query_text(self) -> str:
        return self.query.of(self.source)

    @property
    def fragment_text(self) -> str:
        return self.fragment.of(self.source)

    @property
    def has_query(self) -> bool:
        """True if the URL has a "?", even with nothing after it."""
        return self.query != EMPTY_SPAN

    @property
    def has_fragment(self) -> bool:
        """True if the URL has a "#", even with nothing after it."""
        return self.fragment != EMPTY_SPAN

    def splice(self, span: Span, replacement: str) -> str:
        """Return source with the text under span replaced.

        Args:
            span: Span of this view's source to replace
            replacement: Text to put in its place

        Returns:
            New string; the view itself is left unchanged
        """
        return self.source[:span.start] + replacement + self.source[span.end:]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dict of component strings (absent components are "").

        Example:
            >>> from gemurl.url import decompose
            >>> decompose("gemini://example.org:1966/a?q#f").to_dict()["port"]
            '1966'
        """
        return {
            "scheme": self.scheme_text,
            "host": self.host_text,
            "port": self.port_text,
            "path": self.path_text,
            "query": self.query_text,
            "fragment": self.fragment_text,
        }
