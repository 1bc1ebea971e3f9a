# ABOUTME: Member count extraction from meetup page HTML
# ABOUTME: An ordered cascade of independent probes, most structured first

"""
Extraction Layer: Get the member count out of unstable third-party markup

Probes, in priority order:
- JSON-LD structured data (direct field, @graph entries, nested organization)
- Elements known to hold the count on meetup.com
- Free-text phrases such as "1,800 members" or "community of 1800"
- Meta tags whose property/name mentions members

Data Flow: Page HTML → probes → member count
"""

from .base import CountProbe, ExtractionError, ExtractionResult, MemberCountNotFoundError
from .extractor import MemberCountExtractor
from .probes import (
    DEFAULT_PROBES,
    MetaTagProbe,
    StructuredDataProbe,
    TargetedElementProbe,
    TextPatternProbe,
)

__all__ = [
    "CountProbe",
    "DEFAULT_PROBES",
    "ExtractionError",
    "ExtractionResult",
    "MemberCountExtractor",
    "MemberCountNotFoundError",
    "MetaTagProbe",
    "StructuredDataProbe",
    "TargetedElementProbe",
    "TextPatternProbe",
]
