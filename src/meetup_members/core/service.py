# ABOUTME: High-level service that returns the meetup member count with cache-first logic
# ABOUTME: Orchestrates cache lookup, page fetch, extraction and cache refresh

from __future__ import annotations

from typing import Any

import httpx

from meetup_members.cache import CachedFact, CacheStore, utc_now
from meetup_members.cache.store import Clock
from meetup_members.config import Config, get_config
from meetup_members.errors import MeetupMembersError, MeetupPageError, NetworkError, PageFetchError
from meetup_members.extraction import MemberCountExtractor
from meetup_members.utils.logging import get_logger, log_request


class MeetupMembersService:
    """Service for reading the member count of a meetup group.

    A cached count younger than the configured TTL is returned without any
    network traffic. Otherwise the page is fetched once, the count extracted
    and the cache overwritten. Nothing is retried; concurrent callers may both
    fetch and the last cache write wins.
    """

    def __init__(
        self,
        config: Config | None = None,
        client: httpx.AsyncClient | None = None,
        cache: CacheStore | None = None,
        extractor: MemberCountExtractor | None = None,
        clock: Clock = utc_now,
    ):
        self.config = config or get_config()
        self.clock = clock
        self.cache = cache or CacheStore(self.config.cache_file, clock=clock)
        self.extractor = extractor or MemberCountExtractor()
        self._owns_client = client is None
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=True,
        )
        self.logger = get_logger(__name__)

    async def __aenter__(self) -> MeetupMembersService:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def get_count(self) -> int:
        """Return the member count, from cache when fresh, otherwise from the live page.

        Raises:
            MeetupMembersError: If the page cannot be fetched or holds no member count
        """
        try:
            cached = await self.cache.read()
            if cached is not None and self._is_fresh(cached):
                self.logger.info(
                    "Using cached member count",
                    count=cached.count,
                    age_seconds=round(cached.age(self.clock()).total_seconds(), 1),
                )
                return cached.count

            self.logger.info(
                "Fetching fresh member count",
                url=self.config.meetup_url,
                reason="stale" if cached is not None else "missing",
            )
            count = await self._fetch_member_count()
        except MeetupPageError as e:
            raise MeetupMembersError.wrap(e) from e

        await self.cache.write(count)
        return count

    async def get_cache_status(self) -> dict[str, Any]:
        """Return information about the cache slot without touching the network."""
        cached = await self.cache.read()
        if cached is None:
            return {
                "cache_file": str(self.cache.path),
                "cached": False,
                "count": None,
                "observed_at": None,
                "age_seconds": None,
                "fresh": False,
            }

        age = cached.age(self.clock())
        return {
            "cache_file": str(self.cache.path),
            "cached": True,
            "count": cached.count,
            "observed_at": cached.observed_at.isoformat(),
            "age_seconds": round(age.total_seconds(), 1),
            "fresh": self._is_fresh(cached),
        }

    async def close(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._owns_client:
            await self.http_client.aclose()

    def _is_fresh(self, cached: CachedFact) -> bool:
        return cached.age(self.clock()) < self.config.cache_ttl

    async def _fetch_member_count(self) -> int:
        html = await self._fetch_page(self.config.meetup_url)
        return self.extractor.extract(html)

    @log_request("meetup")
    async def _fetch_page(self, url: str) -> str:
        try:
            response = await self.http_client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(str(e) or type(e).__name__) from e

        if not response.is_success:
            raise PageFetchError(response.status_code, response.reason_phrase)

        return response.text


async def get_meetup_members(config: Config | None = None) -> int:
    """Return the member count of the configured meetup group.

    Raises:
        MeetupMembersError: If the page cannot be fetched or holds no member count
    """
    async with MeetupMembersService(config=config) as service:
        return await service.get_count()
