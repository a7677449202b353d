"""
Profile validation rules.

A profile with the wrong NSID is rejected outright. Otherwise every field
rule is checked and all violations are reported together, in rule order.
"""
import re
from typing import Callable, List, Tuple

from dateutil.parser import isoparse

from logger_config import get_logger
from models import PROFILE_NSID, UserProfile
from utils.exceptions import ProfileValidationError

logger = get_logger(__name__)

MAX_BIO_LENGTH = 256
VALID_THEMES = ('light', 'dark', 'custom')

HEX_COLOR_REGEX = re.compile(r'^#(?:[0-9a-fA-F]{3}){1,2}$')
URL_REGEX = re.compile(r'^(https?://)?([a-zA-Z0-9.-]+)(:[0-9]+)?(/.*)?$')
RFC3339_REGEX = re.compile(
    r'^\d{4}-\d{2}-\d{2}[Tt](?:[01]\d|2[0-3]):[0-5]\d:[0-5]\d(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$'
)

HEX_COLOR_HINT = 'must be a valid hex code (e.g., #RRGGBB or #RGB)'


def is_valid_url(url: str) -> bool:
    return URL_REGEX.fullmatch(url) is not None


def is_valid_hex_color(color: str) -> bool:
    return HEX_COLOR_REGEX.fullmatch(color) is not None


def is_rfc3339(value: str) -> bool:
    """Return True if value is an RFC3339 date-time with a UTC offset."""
    if not RFC3339_REGEX.fullmatch(value):
        return False
    try:
        parsed = isoparse(value.upper())
    except (ValueError, OverflowError):
        return False
    return parsed.tzinfo is not None


# (reason, violated) in reporting order
FIELD_RULES: Tuple[Tuple[str, Callable[[UserProfile], bool]], ...] = (
    (
        f'bio must be {MAX_BIO_LENGTH} characters or fewer',
        lambda p: len(p.bio) > MAX_BIO_LENGTH,
    ),
    (
        'invalid profilePicture URL',
        lambda p: bool(p.profile_picture) and not is_valid_url(p.profile_picture),
    ),
    (
        'invalid profileBanner URL',
        lambda p: bool(p.profile_banner) and not is_valid_url(p.profile_banner),
    ),
    (
        "theme must be 'light', 'dark', or 'custom'",
        lambda p: bool(p.theme) and p.theme not in VALID_THEMES,
    ),
    (
        f'primaryColor {HEX_COLOR_HINT}',
        lambda p: bool(p.primary_color) and not is_valid_hex_color(p.primary_color),
    ),
    (
        f'secondaryColor {HEX_COLOR_HINT}',
        lambda p: bool(p.secondary_color) and not is_valid_hex_color(p.secondary_color),
    ),
)


def validate_profile(profile: UserProfile) -> None:
    """
    Validate a candidate profile.

    Args:
        profile: The profile to check

    Raises:
        ProfileValidationError: With one reason per violated rule
    """
    logger.info('Validating NSID', extra={'received_nsid': profile.nsid})

    if profile.nsid != PROFILE_NSID:
        reason = f"invalid NSID: only '{PROFILE_NSID}' is allowed"
        logger.warning('Profile validation failed', extra={'errors': [reason]})
        raise ProfileValidationError([reason])

    reasons: List[str] = [
        reason for reason, violated in FIELD_RULES if violated(profile)
    ]

    if not profile.updated_at:
        reasons.append('updatedAt is required')
    elif not is_rfc3339(profile.updated_at):
        reasons.append('invalid datetime format for updatedAt')

    if reasons:
        logger.warning('Profile validation failed', extra={'errors': reasons})
        raise ProfileValidationError(reasons)

    logger.info('Profile validation passed')
