# ABOUTME: Persistence of the single cached member count
# ABOUTME: A JSON slot on disk with the observation timestamp

from .store import CachedFact, CacheStore, utc_now

__all__ = ["CachedFact", "CacheStore", "utc_now"]
