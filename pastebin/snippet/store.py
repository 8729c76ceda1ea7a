"""In-memory expiring snippet store keyed by owner name."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Dict, List

from ..worker.sweeper import Sweeper
from .errors import InvalidArgument, NotFound
from .ids import new_snippet_id
from .model import (
    AdminSnapshot,
    DEFAULT_LANGUAGE,
    DEFAULT_TTL_MS,
    MAX_SNIPPETS_PER_OWNER,
    OwnerSummary,
    SWEEP_INTERVAL_MS,
    Snippet,
    SnippetSummary,
)

logger = logging.getLogger("pastebin")

Clock = Callable[[], int]


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


class SnippetStore:
    """Map from owner name to a bounded, insertion-ordered list of snippets.

    A single lock guards the whole map, so every public operation is atomic
    with respect to the others, including the background sweep. Buckets are
    never left empty: an owner whose last snippet is evicted or expires is
    removed from the map.

    ``list_active`` and ``admin_snapshot`` purge expired snippets as a side
    effect of reading. ``get`` and ``peek`` never mutate state.
    """

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        max_snippets: int = MAX_SNIPPETS_PER_OWNER,
        default_ttl_ms: int = DEFAULT_TTL_MS,
        sweep_interval_ms: int = SWEEP_INTERVAL_MS,
    ) -> None:
        if max_snippets <= 0:
            raise ValueError("max_snippets must be positive")
        if default_ttl_ms <= 0:
            raise ValueError("default_ttl_ms must be positive")
        self.clock: Clock = clock or wall_clock_ms
        self.max_snippets = max_snippets
        self.default_ttl_ms = default_ttl_ms
        self._buckets: Dict[str, List[Snippet]] = {}
        self._lock = threading.Lock()
        self._sweeper = Sweeper(self.sweep, interval_seconds=sweep_interval_ms / 1000)

    # Lifecycle -----------------------------------------------------------------

    def start(self) -> None:
        """Start the periodic background sweep."""
        self._sweeper.start()

    def close(self) -> None:
        """Stop the background sweep. Stored snippets are left untouched."""
        self._sweeper.stop()

    @property
    def sweeping(self) -> bool:
        return self._sweeper.running

    def __enter__(self) -> "SnippetStore":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False

    # Operations ----------------------------------------------------------------

    def insert(
        self,
        owner: str | None,
        code: str | None,
        language: str | None = None,
        ttl_ms: int | None = None,
    ) -> Snippet:
        if not owner or not code:
            raise InvalidArgument("Name and code are required")
        if ttl_ms is not None and ttl_ms < 0:
            raise InvalidArgument("expiresIn must not be negative")

        with self._lock:
            now = self.clock()
            bucket = self._buckets.setdefault(owner, [])
            snippet = Snippet(
                id=self._unique_id(bucket, now),
                code=code,
                language=language or DEFAULT_LANGUAGE,
                created_at=now,
                expires_at=now + (ttl_ms or self.default_ttl_ms),
            )
            bucket.append(snippet)
            evicted = len(bucket) - self.max_snippets
            if evicted > 0:
                del bucket[:evicted]
                logger.debug("Evicted %d oldest snippet(s) for %s", evicted, owner)

        logger.debug("Stored snippet %s for %s", snippet.id, owner)
        return snippet

    def list_active(self, owner: str | None) -> List[Snippet]:
        """Return the owner's active snippets, purging expired ones."""
        if not owner:
            raise InvalidArgument("Name is required")

        with self._lock:
            if owner not in self._buckets:
                raise NotFound("No code found for this name")
            active = self._purge_owner(owner, self.clock())
            if not active:
                raise NotFound("No active code found for this name")
            return list(active)

    def get(self, owner: str | None, snippet_id: str | None) -> Snippet:
        if not owner or not snippet_id:
            raise InvalidArgument("Name and snippet ID are required")

        with self._lock:
            bucket = self._buckets.get(owner)
            if bucket is None:
                raise NotFound("No code found for this name")
            now = self.clock()
            for snippet in bucket:
                if snippet.id == snippet_id:
                    if snippet.is_active(now):
                        return snippet
                    break
        raise NotFound("Snippet not found or expired")

    def peek(self, owner: str) -> List[Snippet]:
        """Return the stored bucket as-is, expired entries included."""
        with self._lock:
            return list(self._buckets.get(owner, ()))

    def admin_snapshot(self) -> AdminSnapshot:
        with self._lock:
            now = self.clock()
            owners: List[OwnerSummary] = []
            for owner in list(self._buckets):
                active = self._purge_owner(owner, now)
                if active:
                    owners.append(
                        OwnerSummary(
                            owner=owner,
                            snippets=[SnippetSummary.from_snippet(s) for s in active],
                        )
                    )
        return AdminSnapshot(owners=owners)

    def sweep(self) -> int:
        """Purge expired snippets everywhere; return how many were removed."""
        removed = 0
        with self._lock:
            now = self.clock()
            for owner in list(self._buckets):
                before = len(self._buckets[owner])
                removed += before - len(self._purge_owner(owner, now))
            remaining = len(self._buckets)
        if removed:
            logger.info("Sweep removed %d expired snippet(s); %d owner(s) remain", removed, remaining)
        return removed

    def owners(self) -> List[str]:
        with self._lock:
            return list(self._buckets)

    def __len__(self) -> int:
        with self._lock:
            return sum(len(bucket) for bucket in self._buckets.values())

    # Helpers -------------------------------------------------------------------

    def _purge_owner(self, owner: str, now: int) -> List[Snippet]:
        """Drop expired snippets for ``owner``; remove the owner if emptied.

        Caller must hold the lock.
        """
        active = [snippet for snippet in self._buckets[owner] if snippet.is_active(now)]
        if active:
            self._buckets[owner] = active
        else:
            del self._buckets[owner]
            logger.debug("Removed empty bucket for %s", owner)
        return active

    def _unique_id(self, bucket: List[Snippet], now: int) -> str:
        taken = {snippet.id for snippet in bucket}
        while True:
            snippet_id = new_snippet_id(now)
            if snippet_id not in taken:
                return snippet_id


__all__ = ["Clock", "SnippetStore", "wall_clock_ms"]
