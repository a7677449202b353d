"""
Shared fixtures for profile service tests.
"""
import pytest

from models import PROFILE_NSID, UserProfile


@pytest.fixture
def mock_context():
    """Mock Lambda context."""
    class MockContext:
        def __init__(self):
            self.function_name = 'update-profile'
            self.memory_limit_in_mb = 128
            self.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:update-profile'
            self.aws_request_id = 'test-request-id'

    return MockContext()


@pytest.fixture
def full_profile():
    """A valid profile with every field populated."""
    return UserProfile(
        nsid=PROFILE_NSID,
        display_name='John Doe',
        bio='Photographer and climber.',
        profile_picture='https://cdn.shareframe.social/u/john/avatar.jpg',
        profile_banner='https://cdn.shareframe.social/u/john/banner.jpg',
        theme='dark',
        primary_color='#1a2b3c',
        secondary_color='#fff',
        updated_at='2024-05-01T12:30:00Z',
    )


@pytest.fixture
def full_profile_event():
    """A raw Lambda event carrying a fully populated, valid profile."""
    return {
        'did': 'user123',
        'authToken': 'test-token',
        'profile': {
            'nsid': PROFILE_NSID,
            'displayName': 'John Doe',
            'bio': 'Photographer and climber.',
            'profilePicture': 'https://cdn.shareframe.social/u/john/avatar.jpg',
            'profileBanner': 'https://cdn.shareframe.social/u/john/banner.jpg',
            'theme': 'dark',
            'primaryColor': '#1a2b3c',
            'secondaryColor': '#fff',
            'updatedAt': '2024-05-01T12:30:00Z',
        },
    }
