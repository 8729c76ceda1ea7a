from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from pydantic import BaseModel, ConfigDict

MAX_SNIPPETS_PER_OWNER = 10
DEFAULT_TTL_MS = 24 * 60 * 60 * 1000
SWEEP_INTERVAL_MS = 5 * 60 * 1000
PREVIEW_LENGTH = 100
DEFAULT_LANGUAGE = "plaintext"


class Snippet(BaseModel):
    """A stored paste. Timestamps are milliseconds since the epoch."""

    id: str
    code: str
    language: str = DEFAULT_LANGUAGE
    created_at: int
    expires_at: int

    model_config = ConfigDict(frozen=True, extra="ignore")

    def is_active(self, now: int) -> bool:
        return now < self.expires_at

    @property
    def size(self) -> int:
        return len(self.code)

    def preview(self, limit: int = PREVIEW_LENGTH) -> str:
        if len(self.code) > limit:
            return self.code[:limit] + "..."
        return self.code


@dataclass(frozen=True, slots=True)
class SnippetSummary:
    """Admin view of a snippet; carries a preview instead of the payload."""

    id: str
    language: str
    created_at: int
    expires_at: int
    code_preview: str
    size: int

    @classmethod
    def from_snippet(cls, snippet: Snippet) -> "SnippetSummary":
        return cls(
            id=snippet.id,
            language=snippet.language,
            created_at=snippet.created_at,
            expires_at=snippet.expires_at,
            code_preview=snippet.preview(),
            size=snippet.size,
        )


@dataclass(frozen=True, slots=True)
class OwnerSummary:
    owner: str
    snippets: List[SnippetSummary] = field(default_factory=list)

    @property
    def snippet_count(self) -> int:
        return len(self.snippets)


@dataclass(frozen=True, slots=True)
class AdminSnapshot:
    """Aggregate of every owner that still holds active snippets."""

    owners: List[OwnerSummary] = field(default_factory=list)

    @property
    def total_owners(self) -> int:
        return len(self.owners)

    @property
    def total_snippets(self) -> int:
        return sum(owner.snippet_count for owner in self.owners)


__all__ = [
    "AdminSnapshot",
    "DEFAULT_LANGUAGE",
    "DEFAULT_TTL_MS",
    "MAX_SNIPPETS_PER_OWNER",
    "OwnerSummary",
    "PREVIEW_LENGTH",
    "SWEEP_INTERVAL_MS",
    "Snippet",
    "SnippetSummary",
]
