"""
Release result domain objects for relfinder.

Every provider reports its findings with the same shapes:
- Status: tri-state outcome of a lookup (ok, not found, unavailable)
- Result: one normalized upstream release
- ResultSet: the releases of one project, in upstream order

These objects carry no I/O and serialize to JSONL for output.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional
import json


# Stand-in for a missing or unparseable publish time
ZERO_TIMESTAMP = datetime.min.replace(tzinfo=timezone.utc)


class Status(Enum):
    """Outcome of a provider lookup."""
    OK = "ok"                    # Upstream answered and the body was decoded
    NOT_FOUND = "not_found"      # Upstream confirms the project does not exist
    UNAVAILABLE = "unavailable"  # Connection failure, unexpected status, bad body


@dataclass(frozen=True)
class Result:
    """
    One upstream release, normalized across providers.

    Attributes:
        name: Provider-scoped project identifier (e.g., "owner/repo")
        version: Release version label (e.g., "v1.2.3")
        location: Download URL of the release archive
        published: Publish time, ZERO_TIMESTAMP when unknown
    """

    name: str
    version: str
    location: str
    published: datetime = ZERO_TIMESTAMP

    @property
    def has_published(self) -> bool:
        """True when the publish time is known."""
        return self.published != ZERO_TIMESTAMP

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'name': self.name,
            'version': self.version,
            'location': self.location,
            'published': self.published.isoformat() if self.has_published else None,
        }

    def to_jsonl(self) -> str:
        """Convert to single-line JSON for streaming output."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def __str__(self) -> str:
        return f"{self.name} {self.version}"


@dataclass
class ResultSet:
    """
    Ordered collection of Results for one project.

    Order is whatever the provider received from upstream; nothing
    here sorts by version or date.
    """

    results: List[Result] = field(default_factory=list)

    def append(self, result: Result) -> None:
        self.results.append(result)

    def last(self) -> Optional[Result]:
        """Return the final result in upstream order, or None if empty."""
        if not self.results:
            return None
        return self.results[-1]

    def to_list(self) -> List[Dict[str, Any]]:
        return [result.to_dict() for result in self.results]

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[Result]:
        return iter(self.results)

    def __getitem__(self, index: int) -> Result:
        return self.results[index]
