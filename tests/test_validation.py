"""
Unit tests for profile validation rules.
"""
import dataclasses

import pytest

from models import UserProfile
from utils.exceptions import ProfileValidationError
from validation import is_rfc3339, is_valid_hex_color, is_valid_url, validate_profile


def with_fields(profile, **changes):
    return dataclasses.replace(profile, **changes)


@pytest.mark.validation
class TestValidateProfile:
    """Tests for validate_profile."""

    def test_valid_full_profile(self, full_profile):
        assert validate_profile(full_profile) is None

    def test_optional_fields_may_be_empty(self, full_profile):
        profile = UserProfile(nsid=full_profile.nsid, updated_at=full_profile.updated_at)
        assert validate_profile(profile) is None

    def test_display_name_not_required(self, full_profile):
        assert validate_profile(with_fields(full_profile, display_name='')) is None

    @pytest.mark.parametrize('nsid', ['', 'app.bsky.actor.profile', 'social.shareframe.Profile'])
    def test_invalid_nsid_fails_alone(self, full_profile, nsid):
        """An NSID mismatch is reported on its own, even with other bad fields."""
        profile = with_fields(full_profile, nsid=nsid, bio='x' * 300, theme='neon')

        with pytest.raises(ProfileValidationError) as exc_info:
            validate_profile(profile)

        assert exc_info.value.reasons == [
            "invalid NSID: only 'social.shareframe.profile' is allowed"
        ]

    def test_bio_at_limit_passes(self, full_profile):
        assert validate_profile(with_fields(full_profile, bio='é' * 256)) is None

    def test_bio_too_long(self, full_profile):
        with pytest.raises(ProfileValidationError) as exc_info:
            validate_profile(with_fields(full_profile, bio='a' * 257))

        assert 'bio must be 256 characters or fewer' in exc_info.value.reasons

    def test_all_violations_reported_in_order(self, full_profile):
        profile = with_fields(
            full_profile,
            bio='a' * 257,
            profile_picture='not a url',
            profile_banner='ftp://files.example.com/banner.png',
            theme='neon',
            primary_color='blue',
            secondary_color='#12345',
            updated_at='yesterday',
        )

        with pytest.raises(ProfileValidationError) as exc_info:
            validate_profile(profile)

        assert exc_info.value.reasons == [
            'bio must be 256 characters or fewer',
            'invalid profilePicture URL',
            'invalid profileBanner URL',
            "theme must be 'light', 'dark', or 'custom'",
            'primaryColor must be a valid hex code (e.g., #RRGGBB or #RGB)',
            'secondaryColor must be a valid hex code (e.g., #RRGGBB or #RGB)',
            'invalid datetime format for updatedAt',
        ]
        assert str(exc_info.value).startswith('profile validation failed: bio must be')
        assert '; invalid profilePicture URL; ' in str(exc_info.value)

    def test_missing_updated_at(self, full_profile):
        with pytest.raises(ProfileValidationError) as exc_info:
            validate_profile(with_fields(full_profile, updated_at=''))

        assert exc_info.value.reasons == ['updatedAt is required']

    def test_hour_24_rejected(self, full_profile):
        with pytest.raises(ProfileValidationError) as exc_info:
            validate_profile(with_fields(full_profile, updated_at='2024-05-01T24:00:00Z'))

        assert exc_info.value.reasons == ['invalid datetime format for updatedAt']

    @pytest.mark.parametrize('theme', ['light', 'dark', 'custom'])
    def test_valid_themes(self, full_profile, theme):
        assert validate_profile(with_fields(full_profile, theme=theme)) is None

    def test_theme_is_case_sensitive(self, full_profile):
        with pytest.raises(ProfileValidationError):
            validate_profile(with_fields(full_profile, theme='Dark'))


@pytest.mark.validation
class TestFormatRules:
    """Tests for the individual format checks."""

    @pytest.mark.parametrize('url', [
        'https://example.com',
        'http://example.com:8080/path/to/img.png',
        'example.com/avatar.jpg',
        'cdn.example.co.uk',
        'localhost:3000',
    ])
    def test_valid_urls(self, url):
        assert is_valid_url(url)

    @pytest.mark.parametrize('url', [
        'ftp://example.com',
        'https://',
        'not a url',
        'https://exa mple.com',
        'https://example.com:port',
    ])
    def test_invalid_urls(self, url):
        assert not is_valid_url(url)

    @pytest.mark.parametrize('color', ['#fff', '#FFF', '#1a2B3c', '#000000'])
    def test_valid_hex_colors(self, color):
        assert is_valid_hex_color(color)

    @pytest.mark.parametrize('color', ['fff', '#ff', '#ffff', '#12345', '#1234567', '#ggg', 'blue', '#fff\n'])
    def test_invalid_hex_colors(self, color):
        assert not is_valid_hex_color(color)

    @pytest.mark.parametrize('value', [
        '2024-05-01T12:30:00Z',
        '2024-05-01T12:30:00.123456Z',
        '2024-05-01T12:30:00+02:00',
        '2024-05-01t12:30:00z',
        '2024-02-29T00:00:00-05:00',
    ])
    def test_valid_rfc3339(self, value):
        assert is_rfc3339(value)

    @pytest.mark.parametrize('value', [
        '2024-05-01',
        '2024-05-01T12:30:00',
        '2024-05-01 12:30:00Z',
        '2024-13-01T12:30:00Z',
        '2023-02-29T00:00:00Z',
        '2024-05-01T25:00:00Z',
        '2024-05-01T24:00:00Z',
        'May 1, 2024',
    ])
    def test_invalid_rfc3339(self, value):
        assert not is_rfc3339(value)
