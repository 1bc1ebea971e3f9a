# ABOUTME: Protocol for member count probes and the result of a successful extraction
# ABOUTME: Each probe is one independent heuristic over a parsed HTML document

from typing import Protocol

from lxml.html import HtmlElement
from pydantic import BaseModel, Field

from meetup_members.errors import ExtractionError, MemberCountNotFoundError


class CountProbe(Protocol):
    """Protocol for a single member count heuristic.

    A probe inspects the parsed page and returns the count it found, or None
    when its heuristic does not apply to this page.
    """

    name: str

    def probe(self, document: HtmlElement) -> int | None:
        """Look for the member count in the document.

        Args:
            document: Root element of the parsed page

        Returns:
            The member count, or None if this probe found nothing
        """
        ...


class ExtractionResult(BaseModel):
    """Member count together with the strategy that produced it."""

    count: int = Field(ge=0)
    strategy: str


def parse_count(text: str) -> int:
    """Parse a number written with optional thousands separators, e.g. ``"4,075"``."""
    return int(text.replace(",", ""))


__all__ = [
    "CountProbe",
    "ExtractionError",
    "ExtractionResult",
    "MemberCountNotFoundError",
    "parse_count",
]
