"""In-memory query cache shared by every Streamlit session of the process.

A query is a zero-argument fetch function registered under a stable key.
At most one fetch per key is in flight at a time; callers asking for a key
that is already loading share the same future. The last settled result per
key is kept ("last response wins") and served as ``data`` while a refetch
is in flight. A failed fetch settles with ``data=None`` so callers never
render a stale value next to an error.
"""
from __future__ import annotations

import threading
from collections.abc import Callable, Hashable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Any

import streamlit as st

from transport_admin.logging import logger


@dataclass(frozen=True)
class QueryResult:
    data: Any = None
    is_loading: bool = False
    error: BaseException | None = None


def _settled_result(fut: Future) -> QueryResult:
    exc = fut.exception()
    if exc is not None:
        return QueryResult(data=None, is_loading=False, error=exc)
    return QueryResult(data=fut.result(), is_loading=False, error=None)


class QueryCache:
    def __init__(self, max_workers: int = 8) -> None:
        self._lock = threading.Lock()
        self._inflight: dict[Hashable, Future] = {}
        self._settled: dict[Hashable, QueryResult] = {}
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="query")

    def fetch(self, key: Hashable, fn: Callable[[], Any]) -> Future:
        """Start *fn* for *key* unless a fetch for *key* is already in flight."""
        with self._lock:
            fut = self._inflight.get(key)
            if fut is not None and not fut.done():
                return fut
            if fut is not None:
                self._settled[key] = _settled_result(fut)
            fut = self._executor.submit(fn)
            self._inflight[key] = fut
        fut.add_done_callback(lambda f: self._settle(key, f))
        return fut

    def _settle(self, key: Hashable, fut: Future) -> None:
        result = _settled_result(fut)
        if result.error is not None:
            logger.warning("Query %r failed: %s", key, result.error)
        with self._lock:
            # A newer fetch or an invalidate already took over this key.
            if self._inflight.get(key) is not fut:
                return
            del self._inflight[key]
            self._settled[key] = result

    def state(self, key: Hashable) -> QueryResult:
        """Current state of *key* without blocking."""
        with self._lock:
            fut = self._inflight.get(key)
            settled = self._settled.get(key)
        if fut is not None and not fut.done():
            return QueryResult(data=settled.data if settled else None, is_loading=True)
        if fut is not None:
            return _settled_result(fut)
        return settled or QueryResult()

    def resolve(self, fut: Future, timeout: float | None = None) -> QueryResult:
        """Block until *fut* settles and return its result."""
        wait([fut], timeout=timeout)
        if not fut.done():
            return QueryResult(is_loading=True)
        return _settled_result(fut)

    def use_query(self, key: Hashable, fn: Callable[[], Any]) -> QueryResult:
        return self.resolve(self.fetch(key, fn))

    def use_queries(self, queries: Mapping[Hashable, Callable[[], Any]]) -> dict[Hashable, QueryResult]:
        """Issue every query before awaiting any, then collect the results."""
        futures = {key: self.fetch(key, fn) for key, fn in queries.items()}
        wait(list(futures.values()))
        return {key: _settled_result(fut) for key, fut in futures.items()}

    def invalidate(self, key: Hashable) -> None:
        """Forget the settled result for *key*; an in-flight fetch is left running."""
        with self._lock:
            fut = self._inflight.get(key)
            if fut is not None and fut.done():
                del self._inflight[key]
            self._settled.pop(key, None)

    def scoped(self, scope: Hashable) -> ScopedQueries:
        return ScopedQueries(self, scope)

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)


class ScopedQueries:
    """View of a ``QueryCache`` whose keys all live under one *scope*.

    Pages scope by caller identity so two sessions never share a fetch
    made with the other session's token.
    """

    def __init__(self, cache: QueryCache, scope: Hashable) -> None:
        self._cache = cache
        self.scope = scope

    def _key(self, key: Hashable) -> tuple:
        return (self.scope, key)

    def fetch(self, key: Hashable, fn: Callable[[], Any]) -> Future:
        return self._cache.fetch(self._key(key), fn)

    def state(self, key: Hashable) -> QueryResult:
        return self._cache.state(self._key(key))

    def resolve(self, fut: Future, timeout: float | None = None) -> QueryResult:
        return self._cache.resolve(fut, timeout)

    def use_query(self, key: Hashable, fn: Callable[[], Any]) -> QueryResult:
        return self._cache.use_query(self._key(key), fn)

    def use_queries(self, queries: Mapping[Hashable, Callable[[], Any]]) -> dict[Hashable, QueryResult]:
        scoped = self._cache.use_queries({self._key(k): fn for k, fn in queries.items()})
        return {key: scoped[self._key(key)] for key in queries}

    def invalidate(self, key: Hashable) -> None:
        self._cache.invalidate(self._key(key))


@st.cache_resource
def get_query_cache() -> QueryCache:
    """Process-wide cache; Streamlit keeps one instance across reruns and sessions.

    Pages go through ``QueryCache.scoped(client.scope)``, never the bare keys.
    """
    return QueryCache()
