"""Repository reference and per-repository commit models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class RepositoryRef(BaseModel):
    """Repository a contribution belongs to.

    Two references are equal when their `owner/name` strings match exactly
    (case-sensitive); `updated_at` does not take part in equality.
    """

    model_config = ConfigDict(frozen=True)

    name_with_owner: str
    updated_at: datetime | None = None

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "RepositoryRef":
        """Create from GraphQL Repository object."""
        return cls(
            name_with_owner=data.get("nameWithOwner"),
            updated_at=data.get("updatedAt"),
        )

    @property
    def owner(self) -> str:
        """User or organization owning the repository."""
        return self.name_with_owner.split("/", 1)[0]

    @property
    def name(self) -> str:
        """Repository name without the owner."""
        _, _, name = self.name_with_owner.partition("/")
        return name

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RepositoryRef):
            return self.name_with_owner == other.name_with_owner
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.name_with_owner)


class CommitBucket(BaseModel):
    """Commit total for one repository within the window."""

    model_config = ConfigDict(frozen=True)

    repository: RepositoryRef
    count: int

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "CommitBucket":
        """Create from a commitContributionsByRepository entry."""
        contributions = data.get("contributions") or {}
        return cls(
            repository=RepositoryRef.from_graphql(data.get("repository") or {}),
            count=contributions.get("totalCount"),
        )
