"""
Lambda handler for ShareFrame profile updates.

A request is validated, written to the user's AT Protocol repo (the source
of truth) and then mirrored into the DynamoDB Users table. The record write
always happens first; a failed DynamoDB write after a committed record is
reported as an error and left for out-of-band repair.
"""
import enum
from typing import List, Optional

from config import Config, get_config
from logger_config import get_logger
from models import RequestPayload, UpdateProfileResponse
from services.dynamodb_service import UserStoreService
from services.record_service import RecordService
from utils.decorators import lambda_handler
from utils.exceptions import (
    ProfileServiceError,
    ProfileUpdateError,
    ProfileValidationError,
    RecordServiceFailure,
)
from validation import validate_profile

logger = get_logger(__name__)

MSG_SUCCESS = 'Profile updated successfully'
MSG_VALIDATION_FAILED = 'Profile validation failed'
MSG_RECORD_FAILED = 'Failed to update profile'
MSG_STORE_FAILED = 'Failed to update profile in database'


class UpdateState(enum.Enum):
    RECEIVED = 'received'
    VALIDATED = 'validated'
    RECORD_WRITTEN = 'record_written'
    STORE_WRITTEN = 'store_written'
    COMPLETED = 'completed'
    FAILED = 'failed'


class ProfileUpdater:
    """Runs one profile update through validation and both writes."""

    def __init__(
        self,
        record_service: RecordService,
        store_service: UserStoreService
    ) -> None:
        self.record_service = record_service
        self.store_service = store_service
        self.state = UpdateState.RECEIVED
        self.failure_reason: Optional[str] = None
        self.validation_reasons: List[str] = []

    def _fail(self, reason: str) -> None:
        self.state = UpdateState.FAILED
        self.failure_reason = reason

    def update(self, payload: RequestPayload) -> UpdateProfileResponse:
        """
        Apply a profile update.

        Args:
            payload: The parsed update request

        Returns:
            Success response, or a failure response when validation fails

        Raises:
            ProfileUpdateError: If the record service or DynamoDB write fails
        """
        self.state = UpdateState.RECEIVED
        self.failure_reason = None
        self.validation_reasons = []
        logger.info('Processing profile update request', extra={'did': payload.did})

        try:
            validate_profile(payload.profile)
        except ProfileValidationError as e:
            logger.warning(f'Profile validation failed: {e.message}')
            self._fail('ValidationFailed')
            self.validation_reasons = e.reasons
            return UpdateProfileResponse(
                f"{MSG_VALIDATION_FAILED}: {'; '.join(e.reasons)}", False
            )
        self.state = UpdateState.VALIDATED

        try:
            confirmation = self.record_service.put_record(
                payload.did, payload.profile, payload.auth_token, validate=False
            )
        except RecordServiceFailure as e:
            logger.error(
                f'Failed to update profile in AT Protocol: {e.message}',
                extra={'did': payload.did, 'status_code': e.status_code}
            )
            self._fail('RecordServiceFailure')
            response = UpdateProfileResponse(MSG_RECORD_FAILED, False)
            raise ProfileUpdateError(MSG_RECORD_FAILED, response) from e
        self.state = UpdateState.RECORD_WRITTEN
        logger.info('Record written', extra={'did': payload.did, 'rkey': confirmation.rkey})

        try:
            self.store_service.update_user(payload.did, payload.profile)
        except ProfileServiceError as e:
            # The record is already committed; the two stores now disagree.
            logger.error(
                f'Failed to update profile in DynamoDB: {e.message}',
                extra={
                    'did': payload.did,
                    'error_type': type(e).__name__,
                    'rkey': confirmation.rkey
                }
            )
            self._fail(type(e).__name__)
            response = UpdateProfileResponse(MSG_STORE_FAILED, False)
            raise ProfileUpdateError(MSG_STORE_FAILED, response) from e
        self.state = UpdateState.STORE_WRITTEN

        logger.info('Profile update completed successfully', extra={'did': payload.did})
        self.state = UpdateState.COMPLETED
        return UpdateProfileResponse(MSG_SUCCESS, True)


def create_profile_updater(config: Config) -> ProfileUpdater:
    """
    Build a ProfileUpdater with fresh clients for one invocation.

    Raises:
        ClientConfigError: If the DynamoDB client cannot be created
    """
    record_service = RecordService(
        endpoint=config.record_service_url,
        collection=config.record_collection,
        timeout=config.record_service_timeout
    )
    store_service = UserStoreService(
        table_name=config.users_table,
        region_name=config.aws_region
    )
    return ProfileUpdater(record_service, store_service)


@lambda_handler
def update_profile(event, context):
    """Update a user's profile in AT Protocol and DynamoDB."""
    config = get_config()
    updater = create_profile_updater(config)
    payload = RequestPayload.from_event(event)
    return updater.update(payload).to_dict()
