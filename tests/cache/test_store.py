# ABOUTME: Tests for the on-disk member count cache slot
# ABOUTME: Covers round trips, miss-on-corruption and best-effort writes

import json
from datetime import UTC, datetime, timedelta

import pytest

from meetup_members.cache import CachedFact, CacheStore
from meetup_members.cache.store import MAX_TIMESTAMP_MS

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)
NOW_MS = int(NOW.timestamp() * 1000)


@pytest.fixture
def cache_file(tmp_path):
    return tmp_path / ".cache" / "meetup-members.json"


@pytest.fixture
def store(cache_file):
    return CacheStore(cache_file, clock=lambda: NOW)


class TestCachedFact:
    """Test the cached record model."""

    def test_observed_at_from_millis(self):
        fact = CachedFact(count=4075, timestamp=NOW_MS)
        assert fact.observed_at == NOW

    def test_age(self):
        fact = CachedFact(count=4075, timestamp=NOW_MS - 30 * 60 * 1000)
        assert fact.age(NOW) == timedelta(minutes=30)

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            CachedFact(count=-1, timestamp=NOW_MS)

    @pytest.mark.parametrize("timestamp", [-1, 10**20])
    def test_unrepresentable_timestamp_rejected(self, timestamp):
        with pytest.raises(ValueError):
            CachedFact(count=4075, timestamp=timestamp)

    def test_latest_timestamp_has_observed_at(self):
        fact = CachedFact(count=4075, timestamp=MAX_TIMESTAMP_MS)
        assert fact.observed_at.year == 9999


class TestCacheRead:
    """Test reading the slot."""

    @pytest.mark.asyncio
    async def test_missing_file_is_a_miss(self, store):
        assert await store.read() is None

    @pytest.mark.asyncio
    async def test_reads_existing_record(self, store, cache_file):
        cache_file.parent.mkdir(parents=True)
        cache_file.write_text(json.dumps({"count": 4200, "timestamp": NOW_MS}), encoding="utf-8")

        fact = await store.read()

        assert fact == CachedFact(count=4200, timestamp=NOW_MS)

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            "",
            "[]",
            '{"count": 4200}',
            '{"count": "lots", "timestamp": 1}',
            '{"count": -5, "timestamp": 1}',
            '{"count": 4200, "timestamp": 100000000000000000000}',
            '{"count": 4200, "timestamp": -1}',
        ],
    )
    @pytest.mark.asyncio
    async def test_malformed_record_is_a_miss(self, store, cache_file, content):
        cache_file.parent.mkdir(parents=True)
        cache_file.write_text(content, encoding="utf-8")

        assert await store.read() is None

    @pytest.mark.asyncio
    async def test_undecodable_bytes_are_a_miss(self, store, cache_file):
        cache_file.parent.mkdir(parents=True)
        cache_file.write_bytes(b"\xff\xfe\x00garbage")

        assert await store.read() is None

    @pytest.mark.asyncio
    async def test_directory_in_place_of_file_is_a_miss(self, store, cache_file):
        cache_file.mkdir(parents=True)

        assert await store.read() is None


class TestCacheWrite:
    """Test writing the slot."""

    @pytest.mark.asyncio
    async def test_creates_directory_and_writes_record(self, store, cache_file):
        await store.write(4075)

        data = json.loads(cache_file.read_text(encoding="utf-8"))
        assert data == {"count": 4075, "timestamp": NOW_MS}
        assert '"count": 4075' in cache_file.read_text(encoding="utf-8")

    @pytest.mark.asyncio
    async def test_overwrites_previous_record(self, cache_file):
        times = iter([NOW, NOW + timedelta(hours=2)])
        store = CacheStore(cache_file, clock=lambda: next(times))

        await store.write(4100)
        await store.write(4075)

        fact = await store.read()
        assert fact.count == 4075
        assert fact.observed_at == NOW + timedelta(hours=2)

    @pytest.mark.asyncio
    async def test_write_failure_is_swallowed(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        store = CacheStore(blocker / "meetup-members.json", clock=lambda: NOW)

        assert await store.write(4075) is None
        assert blocker.read_text() == "a file, not a directory"

    @pytest.mark.asyncio
    async def test_write_then_read_round_trip(self, store):
        await store.write(1800)

        fact = await store.read()
        assert fact.count == 1800
        assert fact.observed_at == NOW
