# ABOUTME: Runs member count probes in priority order over a parsed meetup page
# ABOUTME: The first probe to return a count wins; a failing probe never stops the cascade

from collections.abc import Sequence

import lxml.html
from lxml import etree
from lxml.html import HtmlElement

from meetup_members.extraction.base import CountProbe, ExtractionResult, MemberCountNotFoundError
from meetup_members.extraction.probes import DEFAULT_PROBES
from meetup_members.utils.logging import get_logger


class MemberCountExtractor:
    """Extract the member count from meetup page HTML.

    Probes are consulted in order and later probes are skipped once one of
    them returns a count, even if that count looks implausible.
    """

    def __init__(self, probes: Sequence[CountProbe] = DEFAULT_PROBES):
        self.probes = tuple(probes)
        self.logger = get_logger(__name__)

    def extract(self, html: str) -> int:
        """Return the member count found in ``html``.

        Raises:
            MemberCountNotFoundError: If no probe finds a count
        """
        return self.extract_result(html).count

    def extract_result(self, html: str) -> ExtractionResult:
        """Return the member count along with the name of the probe that found it."""
        document = self._parse(html)
        if document is None:
            raise MemberCountNotFoundError()

        for probe in self.probes:
            try:
                count = probe.probe(document)
            except Exception as e:
                self.logger.warning(
                    "Member count probe failed", strategy=probe.name, error=str(e), error_type=type(e).__name__
                )
                continue

            if count is not None:
                self.logger.info("Member count extracted", strategy=probe.name, count=count)
                return ExtractionResult(count=count, strategy=probe.name)

            self.logger.debug("Member count probe found nothing", strategy=probe.name)

        raise MemberCountNotFoundError()

    def _parse(self, html: str) -> HtmlElement | None:
        parser = lxml.html.HTMLParser(encoding="utf-8")
        try:
            return lxml.html.document_fromstring(html.encode("utf-8"), parser=parser)
        except etree.LxmlError as e:
            self.logger.warning("Could not parse meetup page", error=str(e), html_length=len(html))
            return None
