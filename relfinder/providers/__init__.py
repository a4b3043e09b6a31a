"""
Upstream release providers for relfinder.

Each provider recognizes source references for one hosting service and
queries that service for releases:
- GitLabProvider: gitlab.com projects (repository tags)

find_provider() tries the registered providers in order and picks the
first one that recognizes a source reference.
"""

from typing import List, Optional, Tuple

from .base import Provider
from .gitlab import GitLabProvider, RawTag

# Registration order is match order
PROVIDER_CLASSES = [
    GitLabProvider,
]


def all_providers() -> List[Provider]:
    """Create one instance of every registered provider, in match order."""
    return [provider_class() for provider_class in PROVIDER_CLASSES]


def find_provider(query: str, providers: Optional[List[Provider]] = None) -> Tuple[Optional[Provider], str]:
    """
    Find the first provider that recognizes a source reference.

    Args:
        query: Free-form source reference (e.g., a repository URL)
        providers: Providers to try; defaults to all_providers()

    Returns:
        (provider, project_id), or (None, "") if no provider matches
    """
    if providers is None:
        providers = all_providers()

    for provider in providers:
        project_id = provider.match(query)
        if project_id:
            return provider, project_id

    return None, ""


__all__ = [
    'Provider',
    'GitLabProvider',
    'RawTag',
    'PROVIDER_CLASSES',
    'all_providers',
    'find_provider',
]
