import functools
from typing import TypeVar, Any
from collections.abc import Callable

from botocore.exceptions import BotoCoreError, ClientError

from shortlinks.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])

CONDITIONAL_CHECK_FAILED = 'ConditionalCheckFailedException'


def is_conditional_check_failure(error: ClientError) -> bool:
    return error.response.get('Error', {}).get('Code') == CONDITIONAL_CHECK_FAILED


def handle_dynamodb_errors[F](method: F) -> F:
    """Wrap DynamoDB-interacting DAO methods to handle client errors

    Args:
        method (Callable[..., Any]):
            DAO method performing DynamoDB operations which may raise
            botocore.exceptions.ClientError or botocore.exceptions.BotoCoreError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any DynamoDB failure.

    Example:
        >>> @handle_dynamodb_errors
        ... def get_item(self, code):
        ...     return self.table.get_item(Key={'code': code})
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (ClientError, BotoCoreError) as e:
            raise DataStoreError(f'DynamoDB request on table {self.table_name} failed: {e}') from e

    return wrapper
