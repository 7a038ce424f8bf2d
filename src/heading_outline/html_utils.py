"""Shared HTML utilities for heading extraction."""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass, field
from html.parser import HTMLParser

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

_HEADING_RE = re.compile(r"^h[1-6]$")


@dataclass
class RawHeading:
    """A closed heading element as it appeared in the markup."""

    level: int
    attrs: dict[str, str] = field(default_factory=dict)
    inner_html: str = ""


class HeadingScanner(HTMLParser):
    """Streaming scanner that collects h1-h6 elements in document order.

    Matching is non-recursive: once a heading is open, every tag up to the
    end tag of the same name is kept as inner markup. Headings still open
    when the input ends are discarded.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.headings: list[RawHeading] = []
        self._open_tag: str | None = None
        self._open_attrs: dict[str, str] = {}
        self._parts: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if self._open_tag is not None:
            self._parts.append(self.get_starttag_text() or "")
            return
        if _HEADING_RE.match(tag):
            self._open_tag = tag
            self._open_attrs = {name: value or "" for name, value in attrs}
            self._parts = []

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        # Self-closing tags never open a heading.
        if self._open_tag is not None:
            self._parts.append(self.get_starttag_text() or "")

    def handle_endtag(self, tag: str) -> None:
        if self._open_tag is None:
            return
        if tag != self._open_tag:
            self._parts.append(f"</{tag}>")
            return
        self.headings.append(
            RawHeading(
                level=int(tag[1]),
                attrs=self._open_attrs,
                inner_html="".join(self._parts),
            )
        )
        self._open_tag = None
        self._open_attrs = {}
        self._parts = []

    def handle_data(self, data: str) -> None:
        if self._open_tag is not None:
            self._parts.append(html.escape(data, quote=False))

    def handle_entityref(self, name: str) -> None:
        if self._open_tag is not None:
            self._parts.append(f"&{name};")

    def handle_charref(self, name: str) -> None:
        if self._open_tag is not None:
            self._parts.append(f"&#{name};")

    def close(self) -> None:
        super().close()
        if self._open_tag is not None:
            logger.debug("Discarding unterminated <%s> heading", self._open_tag)
            self._open_tag = None
            self._parts = []


def scan_headings(markup: str) -> list[RawHeading]:
    """Return every closed heading element in ``markup``, in document order."""
    scanner = HeadingScanner()
    scanner.feed(markup)
    scanner.close()
    return scanner.headings


def fragment_to_text(fragment: str) -> str:
    """Strip tags and decode entities from an HTML fragment.

    Non-breaking spaces become plain spaces and the result is trimmed;
    whitespace inside the text is kept as-is.
    """
    if not fragment:
        return ""
    # lxml encodes to UTF-8, which rejects lone surrogates.
    fragment = fragment.encode("utf-8", "replace").decode("utf-8")
    if "<" not in fragment:
        # Tag-free text would trip bs4's "looks like a filename" warning.
        fragment = f"<span>{fragment}</span>"
    soup = BeautifulSoup(fragment, "lxml")
    return soup.get_text().replace("\xa0", " ").strip()
