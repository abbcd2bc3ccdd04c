"""Unit tests for the ShortLinkDynamoDBDAO

Test coverage includes:

1. Retrieval behavior
   - Ensures existing items are returned as a populated ShortLinkModel.
   - Confirms missing items or items without originalUrl raise ShortLinkNotFoundError.
   - Confirms DynamoDB errors raise DataStoreError.
   - Ensures invalid types raise BeartypeCallHintParamViolation.

2. Total visits counter
   - Ensures the increment is a single server-side if_not_exists update.
   - Confirms DynamoDB errors raise DataStoreError.

3. Visits by date counter
   - Ensures a missing map is initialized with a conditional write.
   - Ensures an existing map gets an atomic nested increment.
   - Ensures losing the initialization race falls back to the nested increment.
   - Confirms other DynamoDB errors raise DataStoreError.
"""

from decimal import Decimal

import pytest
from beartype.roar import BeartypeCallHintParamViolation
from botocore.exceptions import EndpointConnectionError

from shortlinks.models import ShortLinkModel
from shortlinks.dao.dynamodb import ShortLinkDynamoDBDAO
from shortlinks.dao.exceptions import DataStoreError, ShortLinkNotFoundError


@pytest.fixture
def dao(table, table_name):
    return ShortLinkDynamoDBDAO(dynamodb_table_name=table_name, dynamodb_table=table)


# -------------------------------
# 1. Retrieval behavior
# -------------------------------


def test_get_short_link(dao, table):
    table.get_item.return_value = {
        'Item': {
            'originalUrl': 'https://example.com',
            'totalVisits': Decimal('5'),
            'visitsByDate': {'2025-10-14': Decimal('5')},
        }
    }

    short_link = dao.get('abc')

    assert short_link == ShortLinkModel(
        code='abc',
        original_url='https://example.com',
        total_visits=5,
        visits_by_date={'2025-10-14': 5},
    )
    table.get_item.assert_called_once_with(
        Key={'code': 'abc'},
        ProjectionExpression='#url, #total, #visits',
        ExpressionAttributeNames={'#url': 'originalUrl', '#total': 'totalVisits', '#visits': 'visitsByDate'},
    )


def test_get_short_link_without_counters(dao, table):
    table.get_item.return_value = {'Item': {'originalUrl': 'https://example.com'}}

    short_link = dao.get('abc')

    assert short_link.total_visits is None
    assert short_link.visits_by_date is None


@pytest.mark.parametrize(
    'response',
    [
        {},
        {'Item': {}},
        {'Item': {'totalVisits': Decimal('3')}},
    ],
)
def test_get_short_link_which_does_not_exist(dao, table, response):
    table.get_item.return_value = response

    with pytest.raises(ShortLinkNotFoundError, match="Short link with code 'missing-code' not found."):
        dao.get('missing-code')


def test_get_short_link_with_client_error(dao, table, client_error):
    table.get_item.side_effect = client_error('ResourceNotFoundException', 'GetItem', 'Requested resource not found')

    with pytest.raises(DataStoreError, match='DynamoDB request on table short-links failed: .*Requested resource not found'):
        dao.get('abc')


def test_get_short_link_with_connection_error(dao, table):
    table.get_item.side_effect = EndpointConnectionError(endpoint_url='https://dynamodb.us-east-1.amazonaws.com')

    with pytest.raises(DataStoreError):
        dao.get('abc')


def test_get_short_link_with_invalid_type(dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.get(12345)


# -------------------------------
# 2. Total visits counter
# -------------------------------


def test_increment_total(dao, table):
    table.update_item.return_value = {'Attributes': {'totalVisits': Decimal('6')}}

    assert dao.increment_total('abc') == 6
    table.update_item.assert_called_once_with(
        Key={'code': 'abc'},
        UpdateExpression='SET #total = if_not_exists(#total, :zero) + :inc',
        ExpressionAttributeNames={'#total': 'totalVisits'},
        ExpressionAttributeValues={':zero': 0, ':inc': 1},
        ReturnValues='UPDATED_NEW',
    )
    table.get_item.assert_not_called()


def test_increment_total_with_client_error(dao, table, client_error):
    table.update_item.side_effect = client_error('ProvisionedThroughputExceededException')

    with pytest.raises(DataStoreError, match='ProvisionedThroughputExceededException'):
        dao.increment_total('abc')


# -------------------------------
# 3. Visits by date counter
# -------------------------------


def test_increment_visits_by_date_initializes_missing_map(dao, table):
    table.get_item.return_value = {'Item': {}}

    assert dao.increment_visits_by_date('abc', '2025-10-14') == 1

    table.get_item.assert_called_once_with(
        Key={'code': 'abc'},
        ProjectionExpression='#visits',
        ExpressionAttributeNames={'#visits': 'visitsByDate'},
    )
    table.update_item.assert_called_once_with(
        Key={'code': 'abc'},
        UpdateExpression='SET #visits = :initial',
        ConditionExpression='attribute_not_exists(#visits)',
        ExpressionAttributeNames={'#visits': 'visitsByDate'},
        ExpressionAttributeValues={':initial': {'2025-10-14': 1}},
    )


def test_increment_visits_by_date_on_existing_map(dao, table):
    table.get_item.return_value = {'Item': {'visitsByDate': {'2025-10-13': Decimal('4')}}}
    table.update_item.return_value = {'Attributes': {'visitsByDate': {'2025-10-14': Decimal('1')}}}

    assert dao.increment_visits_by_date('abc', '2025-10-14') == 1
    table.update_item.assert_called_once_with(
        Key={'code': 'abc'},
        UpdateExpression='SET #visits.#day = if_not_exists(#visits.#day, :zero) + :inc',
        ExpressionAttributeNames={'#visits': 'visitsByDate', '#day': '2025-10-14'},
        ExpressionAttributeValues={':zero': 0, ':inc': 1},
        ReturnValues='UPDATED_NEW',
    )


def test_increment_visits_by_date_falls_back_when_map_created_concurrently(dao, table, client_error):
    table.get_item.return_value = {}
    table.update_item.side_effect = [
        client_error('ConditionalCheckFailedException', message='The conditional request failed'),
        {'Attributes': {'visitsByDate': {'2025-10-14': Decimal('2')}}},
    ]

    assert dao.increment_visits_by_date('abc', '2025-10-14') == 2

    assert table.update_item.call_count == 2
    initialize, increment = table.update_item.call_args_list
    assert initialize.kwargs['ConditionExpression'] == 'attribute_not_exists(#visits)'
    assert increment.kwargs['UpdateExpression'] == 'SET #visits.#day = if_not_exists(#visits.#day, :zero) + :inc'


def test_increment_visits_by_date_with_client_error_on_initialization(dao, table, client_error):
    table.get_item.return_value = {}
    table.update_item.side_effect = client_error('InternalServerError')

    with pytest.raises(DataStoreError, match='InternalServerError'):
        dao.increment_visits_by_date('abc', '2025-10-14')
    table.update_item.assert_called_once()


def test_increment_visits_by_date_with_client_error_on_read(dao, table, client_error):
    table.get_item.side_effect = client_error('ThrottlingException', 'GetItem')

    with pytest.raises(DataStoreError, match='ThrottlingException'):
        dao.increment_visits_by_date('abc', '2025-10-14')
    table.update_item.assert_not_called()


def test_increment_visits_by_date_with_invalid_type(dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.increment_visits_by_date('abc', 20251014)
