from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError


def make_client_error(code: str, operation: str = 'UpdateItem', message: str = 'error') -> ClientError:
    return ClientError({'Error': {'Code': code, 'Message': message}}, operation)


@pytest.fixture
def table_name() -> str:
    return 'short-links'


@pytest.fixture
def table(table_name: str) -> MagicMock:
    """Mock a boto3 DynamoDB Table resource."""
    _table = MagicMock()
    _table.name = table_name
    _table.get_item.return_value = {}
    return _table


@pytest.fixture
def client_error():
    """Factory for botocore ClientErrors carrying a DynamoDB error code."""
    return make_client_error
