# ABOUTME: Shared utilities: logging setup and best-effort execution
# ABOUTME: Used by the cache, extraction and service layers

from .resilience import best_effort

__all__ = ["best_effort"]
