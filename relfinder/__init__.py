"""
relfinder - Find the latest upstream release of a project.

Given a free-form source reference (for example a repository URL taken
from a build recipe), relfinder asks each registered provider whether it
recognizes the reference, then queries that provider for the project's
published releases.

Quick Start:
    import relfinder

    provider, project_id = relfinder.find_provider("https://gitlab.com/owner/repo.git")
    if provider:
        result, status = provider.latest(project_id)
        if status == relfinder.Status.OK:
            print(result.version, result.location)

Domain Objects:
    Result - One normalized release (name, version, location, published)
    ResultSet - Releases of one project in upstream order
    Status - OK, NOT_FOUND or UNAVAILABLE

Providers:
    Provider - Abstract base class (name, match, releases, latest)
    GitLabProvider - gitlab.com repository tags
"""

__version__ = "0.1.0"

# Domain objects
from .results import Result, ResultSet, Status, ZERO_TIMESTAMP

# Providers
from .providers import Provider, GitLabProvider, all_providers, find_provider

# Configuration
from .config import load_config, save_config

__all__ = [
    # Version
    "__version__",
    # Domain objects
    "Result",
    "ResultSet",
    "Status",
    "ZERO_TIMESTAMP",
    # Providers
    "Provider",
    "GitLabProvider",
    "all_providers",
    "find_provider",
    # Configuration
    "load_config",
    "save_config",
]
