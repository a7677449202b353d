"""
Record service for writing profile records over AT Protocol XRPC.
"""
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from config import DEFAULT_RECORD_COLLECTION, DEFAULT_RECORD_SERVICE_URL
from logger_config import get_logger
from models import UserProfile
from utils.exceptions import RecordServiceFailure

logger = get_logger(__name__)


@dataclass(frozen=True)
class RecordConfirmation:
    """Acknowledgement of a committed putRecord call."""

    rkey: str
    status_code: int
    body: str = ''


class RecordService:
    """Service for com.atproto.repo.putRecord calls."""

    DEFAULT_HEADERS = {
        'Content-Type': 'application/json',
        'Accept': 'application/json',
    }

    def __init__(
        self,
        endpoint: str = DEFAULT_RECORD_SERVICE_URL,
        collection: str = DEFAULT_RECORD_COLLECTION,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None
    ) -> None:
        """
        Initialize record service.

        Args:
            endpoint: Full putRecord XRPC URL
            collection: Record collection NSID
            timeout: Request timeout in seconds
            session: Optional requests session (defaults to module-level
                requests calls)
        """
        self.endpoint = endpoint
        self.collection = collection
        self.timeout = timeout
        self.session = session

    def build_body(
        self,
        repo: str,
        profile: UserProfile,
        rkey: str,
        validate: bool = False
    ) -> Dict[str, Any]:
        return {
            'repo': repo,
            'collection': self.collection,
            'rkey': rkey,
            'validate': validate,
            'record': profile.to_record(),
        }

    def put_record(
        self,
        repo: str,
        profile: UserProfile,
        bearer_token: str,
        validate: bool = False
    ) -> RecordConfirmation:
        """
        Write a profile record to the user's repo.

        Args:
            repo: The repo (DID) that owns the record
            profile: Profile to store as the record
            bearer_token: Access token for the Authorization header
            validate: Ask the server to validate the record against its
                lexicon

        Returns:
            RecordConfirmation with the generated record key

        Raises:
            RecordServiceFailure: On transport errors or any non-200 status
        """
        rkey = str(uuid.uuid4())
        body = self.build_body(repo, profile, rkey, validate)
        headers = dict(self.DEFAULT_HEADERS)
        headers['Authorization'] = f'Bearer {bearer_token}'

        post = self.session.post if self.session is not None else requests.post

        try:
            response = post(
                self.endpoint,
                json=body,
                headers=headers,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(
                f'Failed to send profile update request to AT Protocol: {str(e)}',
                extra={'repo': repo}
            )
            raise RecordServiceFailure(
                f'failed to send putRecord request: {str(e)}',
                description=str(e)
            ) from e

        if response.status_code != 200:
            description = f'{response.status_code} {response.reason or ""}'.strip()
            logger.error(
                'Profile update failed in AT Protocol',
                extra={'status': description, 'repo': repo}
            )
            raise RecordServiceFailure(
                f'failed to update profile: {description}',
                status_code=response.status_code,
                description=description
            )

        logger.info(
            'Profile successfully updated in AT Protocol',
            extra={'repo': repo, 'rkey': rkey}
        )
        return RecordConfirmation(
            rkey=rkey,
            status_code=response.status_code,
            body=response.text
        )
