"""Pydantic models for the public API surface."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..snippet import AdminSnapshot, OwnerSummary, Snippet, SnippetSummary


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# Required fields are optional here so that a missing value reaches the store
# and is reported as a 400 rather than a schema error.


class PasteRequest(_ApiModel):
    name: str | None = Field(None, description="Owner name the snippet is stored under")
    code: str | None = Field(None, description="Snippet payload")
    language: str | None = Field(None, description="Language tag, defaults to plaintext")
    expires_in: int | None = Field(
        None,
        alias="expiresIn",
        description="Time to live in milliseconds, defaults to 24 hours",
    )


class PasteResponse(_ApiModel):
    snippet_id: str = Field(..., alias="snippetId")
    expires_at: int = Field(..., alias="expiresAt")
    language: str

    @classmethod
    def from_snippet(cls, snippet: Snippet) -> "PasteResponse":
        return cls(
            snippet_id=snippet.id,
            expires_at=snippet.expires_at,
            language=snippet.language,
        )


class ViewRequest(_ApiModel):
    name: str | None = Field(None, description="Owner name to look up")


class SnippetResponse(_ApiModel):
    id: str
    code: str
    language: str
    created_at: int = Field(..., alias="createdAt")
    expires_at: int = Field(..., alias="expiresAt")

    @classmethod
    def from_snippet(cls, snippet: Snippet) -> "SnippetResponse":
        return cls(
            id=snippet.id,
            code=snippet.code,
            language=snippet.language,
            created_at=snippet.created_at,
            expires_at=snippet.expires_at,
        )


class SnippetListResponse(_ApiModel):
    snippets: List[SnippetResponse]


class AdminRequest(_ApiModel):
    admin_key: str | None = Field(None, alias="adminKey")


class AdminSnippet(_ApiModel):
    id: str
    language: str
    created_at: int = Field(..., alias="createdAt")
    expires_at: int = Field(..., alias="expiresAt")
    code_preview: str = Field(..., alias="codePreview")
    size: int

    @classmethod
    def from_summary(cls, summary: SnippetSummary) -> "AdminSnippet":
        return cls(
            id=summary.id,
            language=summary.language,
            created_at=summary.created_at,
            expires_at=summary.expires_at,
            code_preview=summary.code_preview,
            size=summary.size,
        )


class AdminUser(_ApiModel):
    username: str
    snippet_count: int = Field(..., alias="snippetCount")
    snippets: List[AdminSnippet]

    @classmethod
    def from_owner(cls, owner: OwnerSummary) -> "AdminUser":
        return cls(
            username=owner.owner,
            snippet_count=owner.snippet_count,
            snippets=[AdminSnippet.from_summary(s) for s in owner.snippets],
        )


class AdminResponse(_ApiModel):
    total_users: int = Field(..., alias="totalUsers")
    total_snippets: int = Field(..., alias="totalSnippets")
    users: List[AdminUser]

    @classmethod
    def from_snapshot(cls, snapshot: AdminSnapshot) -> "AdminResponse":
        return cls(
            total_users=snapshot.total_owners,
            total_snippets=snapshot.total_snippets,
            users=[AdminUser.from_owner(owner) for owner in snapshot.owners],
        )


class HealthResponse(BaseModel):
    status: str = "ok"


__all__ = [
    "AdminRequest",
    "AdminResponse",
    "AdminSnippet",
    "AdminUser",
    "HealthResponse",
    "PasteRequest",
    "PasteResponse",
    "SnippetListResponse",
    "SnippetResponse",
    "ViewRequest",
]
