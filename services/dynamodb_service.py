"""
DynamoDB service mirroring user profiles into the Users table.
"""
import datetime as dt
from datetime import timezone
from typing import Any, Callable, Dict, Optional, Tuple, TYPE_CHECKING

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from logger_config import get_logger
from models import UserProfile
from utils.exceptions import (
    ClientConfigError,
    InvalidArgument,
    NoFieldsToUpdate,
    StoreWriteFailure,
)

if TYPE_CHECKING:
    from mypy_boto3_dynamodb import DynamoDBClient
else:
    DynamoDBClient = Any

logger = get_logger(__name__)

USERS_TABLE = 'Users'
PARTITION_KEY = 'UserId'

# Attribute name and accessor for each user-editable field, in clause order
PROFILE_FIELDS: Tuple[Tuple[str, Callable[[UserProfile], str]], ...] = (
    ('DisplayName', lambda p: p.display_name),
    ('Bio', lambda p: p.bio),
    ('ProfilePicture', lambda p: p.profile_picture),
    ('ProfileBanner', lambda p: p.profile_banner),
    ('Theme', lambda p: p.theme),
    ('PrimaryColor', lambda p: p.primary_color),
    ('SecondaryColor', lambda p: p.secondary_color),
)


def format_rfc3339(moment: dt.datetime) -> str:
    """Format an aware datetime as RFC3339 in UTC, to the second."""
    return moment.astimezone(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')


def build_update_expression(
    profile: UserProfile,
    now: Optional[dt.datetime] = None
) -> Tuple[str, Dict[str, Dict[str, str]]]:
    """
    Build a DynamoDB SET clause list for the populated profile fields.

    Args:
        profile: Profile whose non-empty fields should be written
        now: Timestamp for UpdatedAt (defaults to the current UTC time)

    Returns:
        Tuple of (update expression without the SET keyword, expression
        attribute values). The values always contain ``:UpdatedAt``, so a
        map of size 1 means no profile field was populated.
    """
    update_parts = []
    expr_values: Dict[str, Dict[str, str]] = {}

    for attribute, accessor in PROFILE_FIELDS:
        value = accessor(profile)
        if value:
            update_parts.append(f'{attribute} = :{attribute}')
            expr_values[f':{attribute}'] = {'S': value}

    moment = now or dt.datetime.now(timezone.utc)
    update_parts.append('UpdatedAt = :UpdatedAt')
    expr_values[':UpdatedAt'] = {'S': format_rfc3339(moment)}

    return ', '.join(update_parts), expr_values


class UserStoreService:
    """Service for the Users table in DynamoDB."""

    def __init__(
        self,
        table_name: str = USERS_TABLE,
        region_name: Optional[str] = None,
        client: Optional[DynamoDBClient] = None
    ) -> None:
        """
        Initialize the user store service.

        Args:
            table_name: Name of the users DynamoDB table
            region_name: AWS region for the client built when none is given
            client: Pre-built DynamoDB client

        Raises:
            ClientConfigError: If a DynamoDB client cannot be created
        """
        self.table_name = table_name
        self.client: DynamoDBClient = client or self._create_client(region_name)

    @staticmethod
    def _create_client(region_name: Optional[str]) -> DynamoDBClient:
        try:
            return boto3.client('dynamodb', region_name=region_name)
        except BotoCoreError as e:
            logger.error(f'Failed to initialize DynamoDB client: {str(e)}')
            raise ClientConfigError(
                f'failed to load AWS SDK config: {str(e)}'
            ) from e

    def update_user(
        self,
        user_id: str,
        profile: UserProfile
    ) -> Dict[str, Any]:
        """
        Write the populated profile fields to the user's item.

        Args:
            user_id: Partition key value (the user's DID)
            profile: Profile to mirror

        Returns:
            The updated attributes returned by DynamoDB

        Raises:
            InvalidArgument: If user_id is empty
            NoFieldsToUpdate: If the profile has no populated fields
            StoreWriteFailure: If the DynamoDB call fails
        """
        if not user_id:
            raise InvalidArgument('userID cannot be empty')

        update_expression, expr_values = build_update_expression(profile)

        if len(expr_values) == 1:
            raise NoFieldsToUpdate('no valid fields provided to update')

        logger.info(
            f'Updating {PARTITION_KEY}: {user_id}, '
            f'UpdateExpression: {update_expression}'
        )

        try:
            response = self.client.update_item(
                TableName=self.table_name,
                Key={PARTITION_KEY: {'S': user_id}},
                UpdateExpression='SET ' + update_expression,
                ExpressionAttributeValues=expr_values,
                ReturnValues='UPDATED_NEW'
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(
                f'DynamoDB update_item failed for table {self.table_name}: {str(e)}',
                extra={'user_id': user_id}
            )
            raise StoreWriteFailure(
                f'failed to update user in DynamoDB: {str(e)}',
                table_name=self.table_name,
                user_id=user_id
            ) from e

        logger.info(f'Successfully updated user {user_id} in table {self.table_name}')
        return response.get('Attributes', {})
