# ABOUTME: The individual member count heuristics, from most to least structured
# ABOUTME: JSON-LD blocks, known count elements, free-text phrases, then meta tags

import json
import re
from typing import Any

from lxml.html import HtmlElement

from meetup_members.extraction.base import parse_count
from meetup_members.utils.logging import get_logger

MEMBER_COUNT_FIELD = "memberCount"

# Digits with optional thousands separators; needs at least two characters
NUMBER_PATTERN = re.compile(r"(\d[\d,]+)")

logger = get_logger(__name__)


def _as_count(value: Any) -> int | None:
    """Accept JSON numbers that are non-negative integers."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, float) and value.is_integer() and value >= 0:
        return int(value)
    return None


def _count_in_entries(entries: list[Any]) -> int | None:
    for entry in entries:
        if isinstance(entry, dict):
            count = _as_count(entry.get(MEMBER_COUNT_FIELD))
            if count is not None:
                return count
    return None


class StructuredDataProbe:
    """Read ``memberCount`` from embedded JSON-LD blocks.

    Blocks are tried in document order and one that fails to parse is skipped.
    Within a block the direct field wins over an ``@graph`` entry, which wins
    over a nested ``organization`` object.
    """

    name = "structured_data"

    def probe(self, document: HtmlElement) -> int | None:
        for script in document.xpath('//script[@type="application/ld+json"]'):
            try:
                data = json.loads(script.text or "")
            except (ValueError, RecursionError) as e:
                logger.debug("Skipping unparseable JSON-LD block", error=str(e))
                continue

            count = self._count_in_block(data)
            if count is not None:
                return count
        return None

    @staticmethod
    def _count_in_block(data: Any) -> int | None:
        if isinstance(data, list):
            return _count_in_entries(data)
        if not isinstance(data, dict):
            return None

        count = _as_count(data.get(MEMBER_COUNT_FIELD))
        if count is not None:
            return count

        graph = data.get("@graph")
        if isinstance(graph, list):
            count = _count_in_entries(graph)
            if count is not None:
                return count

        organization = data.get("organization")
        if isinstance(organization, dict):
            return _as_count(organization.get(MEMBER_COUNT_FIELD))
        return None


class TargetedElementProbe:
    """Read the count from elements Meetup is known to render it in."""

    name = "targeted_element"

    # First match of each selector is a candidate, in this order
    SELECTORS = (
        '//*[@data-testid="group-members-count"]',
        '//*[contains(concat(" ", normalize-space(@class), " "), " groupHomeHeader-memberCount ")]',
        '//*[@data-element-name="members-count"]',
    )

    def probe(self, document: HtmlElement) -> int | None:
        for selector in self.SELECTORS:
            matches = document.xpath(selector)
            if not matches:
                continue

            text = matches[0].text_content().strip()
            number = NUMBER_PATTERN.search(text)
            if number:
                return parse_count(number.group(1))
        return None


class TextPatternProbe:
    """Scan visible text blocks for phrases such as "4,075 members"."""

    name = "text_pattern"

    TAGS = ("span", "div", "p", "h1", "h2", "h3", "h4", "h5", "h6")

    PATTERNS = (
        re.compile(r"(\d[\d,]+)\s+members?", re.IGNORECASE),
        re.compile(r"members?:\s+(\d[\d,]+)", re.IGNORECASE),
        re.compile(r"group of\s+(\d[\d,]+)", re.IGNORECASE),
        re.compile(r"community of\s+(\d[\d,]+)", re.IGNORECASE),
    )

    def probe(self, document: HtmlElement) -> int | None:
        for element in document.iter(*self.TAGS):
            text = element.text_content().strip()
            for pattern in self.PATTERNS:
                match = pattern.search(text)
                if match:
                    return parse_count(match.group(1))
        return None


class MetaTagProbe:
    """Read a purely numeric ``content`` from meta tags named after members."""

    name = "meta_tag"

    def probe(self, document: HtmlElement) -> int | None:
        for meta in document.xpath('//meta[contains(@property, "members") or contains(@name, "members")]'):
            content = meta.get("content")
            if content and re.fullmatch(r"[0-9]+", content):
                return int(content)
        return None


DEFAULT_PROBES = (
    StructuredDataProbe(),
    TargetedElementProbe(),
    TextPatternProbe(),
    MetaTagProbe(),
)
