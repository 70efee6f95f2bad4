import logging
from typing import Mapping, Optional
from urllib.parse import urlsplit

from crobf.consts import FOUNDERS_PREFIX, SITE_DESCRIPTION, SITE_TITLE, TEAM_MEMBERS, TeamMember

logger = logging.getLogger(__name__)

TEXT_FIELDS = ('full_name', 'email', 'github', 'link', 'logo', 'linkedin')
REQUIRED_FIELDS = ('full_name', 'email', 'link')
URL_FIELDS = ('github', 'linkedin')


class TeamMemberNotFound(KeyError):
    """Raised when no team member is registered under a key."""


class InvalidTeamMember(ValueError):
    """Raised when a team member record breaks the table invariants."""

    def __init__(self, key: str, field: str, reason: str) -> None:
        self.key = key
        self.field = field
        self.reason = reason
        super().__init__(f'Team member {key!r}: {field} {reason}')


def get_team_member(key: str) -> TeamMember:
    """
    Get a team member by first-name key

    Args:
        key: Key in TEAM_MEMBERS, e.g. 'Juan'

    Returns:
        TeamMember: The registered record

    Raises:
        TeamMemberNotFound: If the key is not registered
    """
    try:
        return TEAM_MEMBERS[key]
    except KeyError:
        logger.debug(f'Unknown team member key: {key}')
        raise TeamMemberNotFound(key) from None


def find_by_link(link: str) -> Optional[TeamMember]:
    """Find the team member whose page lives at link, ignoring a trailing slash."""
    normalized = link.rstrip('/')
    for member in TEAM_MEMBERS.values():
        if member.link.rstrip('/') == normalized:
            return member
    logger.debug(f'No team member page at {link}')
    return None


def list_team_members() -> list:
    """Return (key, member) pairs in table order."""
    return list(TEAM_MEMBERS.items())


def _is_absolute_url(value: str) -> bool:
    parts = urlsplit(value)
    return parts.scheme in ('http', 'https') and bool(parts.netloc)


def validate_team_members(members: Mapping[str, TeamMember] = TEAM_MEMBERS) -> int:
    """
    Check every record against the table invariants

    Args:
        members: Mapping of key to TeamMember

    Returns:
        int: Number of validated records

    Raises:
        InvalidTeamMember: On the first record that breaks an invariant
    """
    seen_links = {}
    for key, member in members.items():
        if not key or not isinstance(key, str):
            raise InvalidTeamMember(repr(key), 'key', 'must be a non-empty string')

        for field in TEXT_FIELDS:
            if not isinstance(getattr(member, field), str):
                raise InvalidTeamMember(key, field, 'must be a string, use "" when absent')

        for field in REQUIRED_FIELDS:
            if not getattr(member, field):
                raise InvalidTeamMember(key, field, 'must not be empty')

        if not member.link.startswith(FOUNDERS_PREFIX) or member.link == FOUNDERS_PREFIX:
            raise InvalidTeamMember(key, 'link', f'must be a path under {FOUNDERS_PREFIX}')

        for field in URL_FIELDS:
            value = getattr(member, field)
            if value and not _is_absolute_url(value):
                raise InvalidTeamMember(key, field, f'is not an absolute URL: {value}')

        link = member.link.rstrip('/')
        if link in seen_links:
            raise InvalidTeamMember(key, 'link', f'already used by {seen_links[link]!r}')
        seen_links[link] = key

    return len(seen_links)


def init_app(app):
    """Expose the site constants and team table to every template."""

    @app.context_processor
    def inject_site_data():
        return {
            'site_title': SITE_TITLE,
            'site_description': SITE_DESCRIPTION,
            'team_members': {key: member.to_dict() for key, member in TEAM_MEMBERS.items()}
        }
