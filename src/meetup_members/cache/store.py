# ABOUTME: On-disk cache slot holding the last observed member count and when it was seen
# ABOUTME: Reads fold every failure into a cache miss, writes are best-effort

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from meetup_members.utils.logging import get_logger
from meetup_members.utils.resilience import best_effort

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def to_epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


# Latest observation time a datetime can represent
MAX_TIMESTAMP_MS = to_epoch_millis(datetime(9999, 12, 31, tzinfo=UTC))


class CachedFact(BaseModel):
    """A member count together with the moment it was observed.

    Serialized as ``{"count": <int>, "timestamp": <epoch milliseconds>}``.
    """

    count: int = Field(ge=0, description="Observed member count")
    timestamp: int = Field(
        ge=0, le=MAX_TIMESTAMP_MS, description="Observation time in milliseconds since the Unix epoch"
    )

    @property
    def observed_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp / 1000, UTC)

    def age(self, now: datetime) -> timedelta:
        """Time elapsed between the observation and ``now``."""
        return timedelta(milliseconds=to_epoch_millis(now) - self.timestamp)


class CacheStore:
    """Read/write access to a single cached member count.

    The store has no notion of freshness; callers decide whether a record is
    still usable. Deleting the backing file forces the next read to miss.
    """

    def __init__(self, path: Path | str, clock: Clock = utc_now):
        self.path = Path(path)
        self.clock = clock
        self.logger = get_logger(__name__)

    async def read(self) -> CachedFact | None:
        """Load the cached record, or None if it is missing, unreadable or malformed."""
        try:
            raw = await asyncio.to_thread(self.path.read_text, encoding="utf-8")
            fact = CachedFact.model_validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            self.logger.debug("Cache miss", path=str(self.path), reason=type(e).__name__)
            return None

        self.logger.debug("Cache read", path=str(self.path), count=fact.count, timestamp=fact.timestamp)
        return fact

    @best_effort("cache_write")
    async def write(self, count: int) -> None:
        """Overwrite the slot with ``count`` observed now, creating the directory if needed."""
        fact = CachedFact(count=count, timestamp=to_epoch_millis(self.clock()))
        await asyncio.to_thread(self._persist, fact)
        self.logger.info("Cached member count", path=str(self.path), count=fact.count)

    def _persist(self, fact: CachedFact) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(fact.model_dump_json(indent=2), encoding="utf-8")
