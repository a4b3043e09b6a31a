"""
Tests for the provider registry and the Provider base class.
"""

from unittest.mock import patch

import pytest

from relfinder.providers import (
    GitLabProvider,
    Provider,
    all_providers,
    find_provider,
)
from relfinder.results import Result, ResultSet, Status


class StaticProvider(Provider):
    """Provider that serves a fixed ResultSet for tests."""

    def __init__(self, label, prefix, results=None, status=Status.OK):
        self.label = label
        self.prefix = prefix
        self.results = results
        self.status = status

    def name(self):
        return self.label

    def match(self, query):
        if query.startswith(self.prefix):
            return query[len(self.prefix):]
        return ""

    def releases(self, project_id):
        if self.status != Status.OK:
            return None, self.status
        return self.results, Status.OK


def make_result(version):
    return Result(name="p", version=version, location=f"https://example.org/{version}.tar.gz")


class TestProviderContract:
    """Tests for the Provider abstract base class."""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            Provider()

    def test_latest_takes_last(self):
        provider = StaticProvider("s", "s:", ResultSet([make_result("b"), make_result("a")]))
        result, status = provider.latest("p")
        assert status == Status.OK
        assert result.version == "a"

    def test_latest_propagates_status(self):
        provider = StaticProvider("s", "s:", status=Status.UNAVAILABLE)
        assert provider.latest("p") == (None, Status.UNAVAILABLE)

    def test_latest_empty_set(self):
        provider = StaticProvider("s", "s:", ResultSet())
        assert provider.latest("p") == (None, Status.NOT_FOUND)


class TestRegistry:
    """Tests for all_providers() and find_provider()."""

    def test_all_providers_includes_gitlab(self):
        with patch('relfinder.providers.gitlab.load_config', return_value={}):
            providers = all_providers()

        assert [p.name() for p in providers] == ["GitLab"]
        assert isinstance(providers[0], GitLabProvider)

    def test_find_gitlab(self):
        gitlab = GitLabProvider(timeout=1, user_agent="t")
        provider, project_id = find_provider("https://gitlab.com/foo/bar.git", [gitlab])
        assert provider is gitlab
        assert project_id == "foo/bar"

    def test_find_none(self):
        gitlab = GitLabProvider(timeout=1, user_agent="t")
        assert find_provider("https://github.com/foo/bar", [gitlab]) == (None, "")

    def test_first_match_wins(self):
        first = StaticProvider("first", "x:")
        second = StaticProvider("second", "x:")
        provider, project_id = find_provider("x:proj", [first, second])
        assert provider is first
        assert project_id == "proj"

    def test_skips_non_matching(self):
        first = StaticProvider("first", "a:")
        second = StaticProvider("second", "b:")
        provider, _ = find_provider("b:proj", [first, second])
        assert provider is second
