"""Abstract base class for upstream release providers."""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..results import Result, ResultSet, Status


class Provider(ABC):
    """
    A hosting service that relfinder knows how to query for releases.

    Implementations never raise for ordinary failures (network errors,
    missing projects, bad responses); they log them and report a Status.
    """

    @abstractmethod
    def name(self) -> str:
        """Human-readable provider label."""

    @abstractmethod
    def match(self, query: str) -> str:
        """
        Extract a project identifier from a source reference.

        Args:
            query: Free-form source reference, usually a URL

        Returns:
            Project identifier, or "" if this provider does not handle it
        """

    @abstractmethod
    def releases(self, project_id: str) -> Tuple[Optional[ResultSet], Status]:
        """
        Fetch every published release of a project.

        Args:
            project_id: Identifier returned by match()

        Returns:
            (ResultSet, Status.OK) on success, (None, status) otherwise
        """

    def latest(self, project_id: str) -> Tuple[Optional[Result], Status]:
        """
        Return the last release reported by upstream.

        "Last" is positional: the final entry of releases(), not the
        newest by date or version.
        """
        results, status = self.releases(project_id)
        if status != Status.OK:
            return None, status

        result = results.last()
        # An OK answer with no tags has nothing to report
        if result is None:
            return None, Status.NOT_FOUND
        return result, Status.OK

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
