# ABOUTME: Shared fixtures for meetup member count tests
# ABOUTME: Sample meetup pages in each shape the extractor understands

import logging
from types import SimpleNamespace

import pytest
import structlog
from loguru import logger as loguru_logger

from meetup_members.utils.logging import LoguruHandler

PAGE_WITH_JSON_LD = """
<!DOCTYPE html>
<html>
<head>
  <title>London.js Meetup</title>
  <script type="application/ld+json">
  {
    "@context": "https://schema.org",
    "@type": "Organization",
    "name": "London.js",
    "memberCount": 4075
  }
  </script>
</head>
<body>
  <h1>London.js</h1>
  <p>A JavaScript community</p>
</body>
</html>
"""

PAGE_WITH_GRAPH_JSON_LD = """
<!DOCTYPE html>
<html>
<head>
  <title>London.js Meetup</title>
  <script type="application/ld+json">
  {
    "@context": "https://schema.org",
    "@graph": [
      {
        "@type": "Organization",
        "name": "London.js",
        "memberCount": 3500
      }
    ]
  }
  </script>
</head>
<body>
  <h1>London.js</h1>
  <p>A JavaScript community</p>
</body>
</html>
"""

PAGE_WITH_COUNT_ELEMENT = """
<!DOCTYPE html>
<html>
<head>
  <title>London.js Meetup</title>
</head>
<body>
  <h1>London.js</h1>
  <p>A JavaScript community</p>
  <div data-testid="group-members-count">2500 members</div>
</body>
</html>
"""

PAGE_WITH_PLAIN_TEXT = """
<!DOCTYPE html>
<html>
<head>
  <title>London.js Meetup</title>
</head>
<body>
  <h1>London.js</h1>
  <p>A JavaScript community with 1800 members</p>
</body>
</html>
"""

PAGE_WITH_BROKEN_JSON_LD = """
<!DOCTYPE html>
<html>
<head>
  <title>London.js Meetup</title>
  <script type="application/ld+json">
  {
    "invalid JSON
  </script>
</head>
<body>
  <h1>London.js</h1>
  <div class="groupHomeHeader-memberCount">5000 members</div>
</body>
</html>
"""

PAGE_WITH_CONFLICTING_COUNTS = """
<!DOCTYPE html>
<html>
<head>
  <script type="application/ld+json">{"@type": "Organization", "memberCount": 4075}</script>
  <meta property="group:members" content="1">
</head>
<body>
  <div data-testid="group-members-count">9,999 members</div>
  <p>A JavaScript community with 1800 members</p>
</body>
</html>
"""

PAGE_WITH_META_TAG = """
<!DOCTYPE html>
<html>
<head>
  <title>London.js Meetup</title>
  <meta name="group-members" content="6120">
</head>
<body>
  <h1>London.js</h1>
</body>
</html>
"""

PAGE_WITHOUT_COUNT = """
<!DOCTYPE html>
<html>
<head>
  <title>London.js Meetup</title>
</head>
<body>
  <h1>London.js</h1>
  <p>A JavaScript community</p>
</body>
</html>
"""


@pytest.fixture
def pages() -> SimpleNamespace:
    """Sample meetup pages keyed by the shape of their member count."""
    return SimpleNamespace(
        json_ld=PAGE_WITH_JSON_LD,
        graph_json_ld=PAGE_WITH_GRAPH_JSON_LD,
        count_element=PAGE_WITH_COUNT_ELEMENT,
        plain_text=PAGE_WITH_PLAIN_TEXT,
        broken_json_ld=PAGE_WITH_BROKEN_JSON_LD,
        conflicting_counts=PAGE_WITH_CONFLICTING_COUNTS,
        meta_tag=PAGE_WITH_META_TAG,
        without_count=PAGE_WITHOUT_COUNT,
    )


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo configure_logging so sinks bound to one test's streams never outlive it."""
    yield
    root = logging.getLogger()
    root.handlers = [handler for handler in root.handlers if not isinstance(handler, LoguruHandler)]
    root.setLevel(logging.WARNING)
    structlog.reset_defaults()
    loguru_logger.remove()
