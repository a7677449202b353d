"""
Data models for profile update requests and responses.
"""
from dataclasses import dataclass, field
from typing import Any, Dict

from utils.exceptions import InvalidArgument

PROFILE_NSID = 'social.shareframe.profile'


def _as_str(value: Any) -> str:
    if value is None:
        return ''
    return str(value)


@dataclass(frozen=True)
class UserProfile:
    """A ShareFrame user profile record."""

    nsid: str = ''
    display_name: str = ''
    bio: str = ''
    profile_picture: str = ''
    profile_banner: str = ''
    theme: str = ''
    primary_color: str = ''
    secondary_color: str = ''
    updated_at: str = ''

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UserProfile':
        """Build a profile from its wire (camelCase JSON) representation."""
        return cls(
            nsid=_as_str(data.get('nsid')),
            display_name=_as_str(data.get('displayName')),
            bio=_as_str(data.get('bio')),
            profile_picture=_as_str(data.get('profilePicture')),
            profile_banner=_as_str(data.get('profileBanner')),
            theme=_as_str(data.get('theme')),
            primary_color=_as_str(data.get('primaryColor')),
            secondary_color=_as_str(data.get('secondaryColor')),
            updated_at=_as_str(data.get('updatedAt')),
        )

    def to_record(self) -> Dict[str, str]:
        """
        Serialize to the wire representation.

        nsid, displayName and updatedAt are always written; the remaining
        fields are left out when empty.
        """
        record = {
            'nsid': self.nsid,
            'displayName': self.display_name,
        }
        optional = (
            ('bio', self.bio),
            ('profilePicture', self.profile_picture),
            ('profileBanner', self.profile_banner),
            ('theme', self.theme),
            ('primaryColor', self.primary_color),
            ('secondaryColor', self.secondary_color),
        )
        for key, value in optional:
            if value:
                record[key] = value
        record['updatedAt'] = self.updated_at
        return record


@dataclass(frozen=True)
class RequestPayload:
    """Inbound update request: whose profile, the new profile, and auth."""

    did: str
    profile: UserProfile = field(default_factory=UserProfile)
    auth_token: str = ''

    @classmethod
    def from_event(cls, event: Any) -> 'RequestPayload':
        """
        Parse a Lambda event into a request payload.

        The subject identifier is read from ``did`` and falls back to
        ``repo``.

        Raises:
            InvalidArgument: If the event or its profile is not an object
        """
        if not isinstance(event, dict):
            raise InvalidArgument('request payload must be a JSON object')

        profile_data = event.get('profile') or {}
        if not isinstance(profile_data, dict):
            raise InvalidArgument('profile must be a JSON object')

        return cls(
            did=_as_str(event.get('did') or event.get('repo')),
            profile=UserProfile.from_dict(profile_data),
            auth_token=_as_str(event.get('authToken')),
        )


@dataclass(frozen=True)
class UpdateProfileResponse:
    message: str
    success: bool

    def to_dict(self) -> Dict[str, Any]:
        return {'message': self.message, 'success': self.success}
