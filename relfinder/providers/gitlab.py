"""
GitLab release provider for relfinder.

Looks up the tags of a gitlab.com project through the public REST API:
- Recognizes gitlab.com/<owner>/<project> anywhere in a source reference
- Lists tags from /api/v4/projects/<id>/repository/tags (first page only)
- Points every release at the tag's .tar.gz source archive

Public API, no authentication.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, List, Dict, Any, Tuple

import requests

from ..config import load_config
from ..results import Result, ResultSet, Status, ZERO_TIMESTAMP
from .base import Provider

logger = logging.getLogger(__name__)

# Archive download URL: project id, tag, archive file name
SOURCE_FORMAT = "https://gitlab.com/{}/-/archive/{}/{}.tar.gz"

# Tags listing endpoint: percent-encoded project id
TAGS_ENDPOINT = "https://gitlab.com/api/v4/projects/{}/repository/tags"

SOURCE_REGEX = re.compile(r"gitlab\.com/([^/]+/[^/.]+)")

DEFAULT_TIMEOUT = 10


def parse_timeout(value: Any) -> float:
    """
    Convert a configured timeout into seconds for requests.

    Booleans, non-numbers and non-positive values fall back to
    DEFAULT_TIMEOUT with a warning.
    """
    # bool is an int subclass; "1"/"0" env overrides arrive as True/False
    if not isinstance(value, bool):
        try:
            seconds = float(value)
        except (TypeError, ValueError):
            seconds = None
        if seconds is not None and seconds > 0:
            return seconds

    logger.warning(f"Invalid GitLab timeout {value!r}, using {DEFAULT_TIMEOUT}s")
    return float(DEFAULT_TIMEOUT)


def parse_rfc3339(value: Any) -> Optional[datetime]:
    """
    Parse an RFC 3339 date-time such as "2023-04-01T12:30:00.000+02:00".

    Returns:
        Timezone-aware datetime, or None if the value is not RFC 3339
    """
    # RFC 3339 needs a full date-time with an explicit offset
    if not isinstance(value, str) or 'T' not in value:
        return None

    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return None
    return parsed


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"expected string for {key!r}, got {type(value).__name__}")
    return value


def _optional_object(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"expected object for {key!r}, got {type(value).__name__}")
    return value


@dataclass
class RawTag:
    """A tag as listed by the GitLab API."""
    name: str                                # Tag label, e.g. "v1.2.3"
    authored_date: str = ""                  # commit.authored_date, RFC 3339
    release_tag_name: Optional[str] = None   # release.tag_name, absent without a release
    release_description: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Any) -> 'RawTag':
        """
        Create from one entry of the tags API response.

        Missing fields become empty values. Fields of the wrong JSON
        type raise ValueError.
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected tag object, got {type(data).__name__}")

        commit = _optional_object(data, 'commit')
        release = _optional_object(data, 'release')

        return cls(
            name=_optional_str(data, 'name') or '',
            authored_date=_optional_str(commit, 'authored_date') or '',
            release_tag_name=_optional_str(release, 'tag_name'),
            release_description=_optional_str(release, 'description'),
        )

    @property
    def has_release(self) -> bool:
        return self.release_tag_name is not None

    def convert(self, project_id: str) -> Result:
        """
        Normalize this tag into a Result for project_id.

        Never fails: an unparseable authored date becomes ZERO_TIMESTAMP.
        """
        published = parse_rfc3339(self.authored_date) or ZERO_TIMESTAMP
        basename = project_id.split('/', 1)[-1]
        archive = f"{basename}-{self.name}"
        location = SOURCE_FORMAT.format(project_id, self.name, archive)

        return Result(
            name=project_id,
            version=self.name,
            location=location,
            published=published,
        )


def decode_tags(data: Any) -> List[RawTag]:
    """Decode a parsed tags API response into RawTags, raising ValueError on a schema mismatch."""
    if not isinstance(data, list):
        raise ValueError(f"expected list of tags, got {type(data).__name__}")
    return [RawTag.from_api_response(entry) for entry in data]


class GitLabProvider(Provider):
    """
    Release provider for projects hosted on gitlab.com.

    Example:
        provider = GitLabProvider()
        project = provider.match("https://gitlab.com/owner/repo.git")
        release, status = provider.latest(project)
        if status == Status.OK:
            print(release.version, release.location)
    """

    def __init__(self, timeout: Optional[float] = None, user_agent: Optional[str] = None):
        """
        Initialize GitLabProvider.

        Args:
            timeout: HTTP request timeout in seconds (defaults to gitlab.timeout_seconds)
            user_agent: User-Agent header (defaults to gitlab.user_agent)
        """
        if timeout is None or user_agent is None:
            gitlab_config = load_config().get('gitlab', {})
            if timeout is None:
                timeout = gitlab_config.get('timeout_seconds', DEFAULT_TIMEOUT)
            if user_agent is None:
                user_agent = gitlab_config.get('user_agent', 'relfinder')

        self.timeout = parse_timeout(timeout)
        self.session = requests.Session()
        self.session.headers.update({
            'Accept': 'application/json',
            'User-Agent': user_agent,
        })

    def name(self) -> str:
        return "GitLab"

    def match(self, query: str) -> str:
        found = SOURCE_REGEX.search(query)
        if not found:
            return ""
        return found.group(1)

    def releases(self, project_id: str) -> Tuple[Optional[ResultSet], Status]:
        """
        Fetch the tags of a GitLab project as a ResultSet.

        Args:
            project_id: "owner/project" as returned by match()

        Returns:
            (ResultSet, Status.OK) in API order, or (None, status) on failure
        """
        encoded = project_id.replace('/', '%2f', 1)
        url = TAGS_ENDPOINT.format(encoded)

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"GitLab API request failed for {project_id}: {e}")
            return None, Status.UNAVAILABLE

        try:
            if response.status_code == 404:
                logger.debug(f"GitLab project {project_id} not found")
                return None, Status.NOT_FOUND
            if response.status_code != 200:
                logger.warning(f"GitLab API returned status {response.status_code} for {project_id}")
                return None, Status.UNAVAILABLE

            try:
                tags = decode_tags(response.json())
            except ValueError as e:
                logger.warning(f"GitLab API returned invalid tags for {project_id}: {e}")
                return None, Status.UNAVAILABLE
        finally:
            response.close()

        results = ResultSet([tag.convert(project_id) for tag in tags])
        logger.debug(f"GitLab: found {len(results)} tags for {project_id}")
        return results, Status.OK
