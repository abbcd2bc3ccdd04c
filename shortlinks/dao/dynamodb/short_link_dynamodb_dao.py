"""Data Access Object (DAO) implementation for short links stored in DynamoDB

This module provides a DynamoDB-based implementation of ShortLinkBaseDAO.

Each short link is one item keyed by `code`:

    {
        "code": "abc123",
        "originalUrl": "https://example.com/page",
        "totalVisits": 42,
        "visitsByDate": {"2025-10-14": 40, "2025-10-15": 2}
    }

`totalVisits` and `visitsByDate` are absent until the first visit.

Classes:
    ShortLinkDynamoDBDAO:
        DAO for reading short links and updating their visit counters in DynamoDB.

Example:
    >>> from shortlinks.dao.dynamodb import ShortLinkDynamoDBDAO

    >>> dao = ShortLinkDynamoDBDAO(dynamodb_table_name='short-links')
    >>> dao.get('abc123').original_url
    'https://example.com/page'
    >>> dao.increment_total('abc123')
    43
    >>> dao.increment_visits_by_date('abc123', '2025-10-15')
    3
"""

import logging

from beartype import beartype
from botocore.exceptions import ClientError

from shortlinks.constants import Attr
from shortlinks.models import ShortLinkModel
from shortlinks.dao.base import ShortLinkBaseDAO
from shortlinks.dao.dynamodb.mixins import DynamoDBTableMixin
from shortlinks.dao.dynamodb.helpers import handle_dynamodb_errors, is_conditional_check_failure
from shortlinks.dao.exceptions import ShortLinkNotFoundError


logger = logging.getLogger(__name__)


class ShortLinkDynamoDBDAO(DynamoDBTableMixin, ShortLinkBaseDAO):
    """DynamoDB-based Data Access Object (DAO) for short links

    This class implements the ShortLinkBaseDAO interface using a DynamoDB table.

    Attributes (see DynamoDBTableMixin):
        table (boto3 Table resource):
            Table holding short link records.
        table_name (str):
            Name of that table.

    Methods:
        get(code: str, **kwargs) -> ShortLinkModel:
            Read a short link and its counters.
            Raises ShortLinkNotFoundError when the item or its originalUrl is missing.

        increment_total(code: str, **kwargs) -> int:
            SET totalVisits = if_not_exists(totalVisits, 0) + 1

        increment_visits_by_date(code: str, day: str, **kwargs) -> int:
            Initialize visitsByDate on the first visit, atomically increment visitsByDate[day] afterwards.

    All methods raise DataStoreError on DynamoDB failures.
    """

    @handle_dynamodb_errors
    @beartype
    def get(self, code: str, **kwargs) -> ShortLinkModel:
        """Retrieve a short link by code

        Args:
            code (str):
                The code of the short link.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortLinkModel:
                The short link with its visit counters.

        Raises:
            ShortLinkNotFoundError:
                If no item exists for `code` or the item lacks `originalUrl`.
            DataStoreError:
                If the DynamoDB request fails.

        Example:
            >>> dao.get('abc123')
            ShortLinkModel(code='abc123', original_url='https://example.com', total_visits=None, visits_by_date=None)
        """
        response = self.table.get_item(
            Key={Attr.CODE: code},
            ProjectionExpression='#url, #total, #visits',
            ExpressionAttributeNames={
                '#url': Attr.ORIGINAL_URL,
                '#total': Attr.TOTAL_VISITS,
                '#visits': Attr.VISITS_BY_DATE,
            },
        )
        item = response.get('Item')
        if not item or Attr.ORIGINAL_URL not in item:
            raise ShortLinkNotFoundError(f"Short link with code '{code}' not found.")

        total_visits = item.get(Attr.TOTAL_VISITS)
        visits_by_date = item.get(Attr.VISITS_BY_DATE)
        return ShortLinkModel(
            code=code,
            original_url=item[Attr.ORIGINAL_URL],
            total_visits=None if total_visits is None else int(total_visits),
            visits_by_date=None if visits_by_date is None else {day: int(n) for day, n in visits_by_date.items()},
        )

    @handle_dynamodb_errors
    @beartype
    def increment_total(self, code: str, **kwargs) -> int:
        """Atomically add 1 to `totalVisits`

        The increment expression is evaluated by DynamoDB, so concurrent
        invocations for the same code never lose an update.

        Args:
            code (str):
                The code of the visited short link.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            int: `totalVisits` after the increment.

        Example:
            >>> dao.increment_total('abc123')
            1
        """
        response = self.table.update_item(
            Key={Attr.CODE: code},
            UpdateExpression='SET #total = if_not_exists(#total, :zero) + :inc',
            ExpressionAttributeNames={'#total': Attr.TOTAL_VISITS},
            ExpressionAttributeValues={':zero': 0, ':inc': 1},
            ReturnValues='UPDATED_NEW',
        )
        return int(response['Attributes'][Attr.TOTAL_VISITS])

    @handle_dynamodb_errors
    @beartype
    def increment_visits_by_date(self, code: str, day: str, **kwargs) -> int:
        """Add 1 to `visitsByDate[day]`

        DynamoDB can't SET a nested map key while the parent map doesn't exist,
        so the map is read first:

        - Map absent: create it as {day: 1} with a conditional write that only
          succeeds while the map is still absent.
        - Map present, or the conditional write lost against a concurrent first
          visitor: SET visitsByDate.#day = if_not_exists(visitsByDate.#day, 0) + 1

        NOTE: Without the condition, two concurrent first visits would both
              write {day: 1} and one visit would be silently lost:

              (lambda 1): GetItem visitsByDate => absent
              (lambda 2): GetItem visitsByDate => absent
              (lambda 1): SET visitsByDate = {day: 1}
              (lambda 2): SET visitsByDate = {day: 1}   => final count 1, expected 2

              With `attribute_not_exists(visitsByDate)` lambda 2's write fails and
              it falls back to the atomic nested increment => final count 2.

        Args:
            code (str):
                The code of the visited short link.
            day (str):
                Calendar day formatted as YYYY-MM-DD.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            int: `visitsByDate[day]` after the increment.

        Example:
            >>> dao.increment_visits_by_date('abc123', '2025-10-15')
            1
        """
        response = self.table.get_item(
            Key={Attr.CODE: code},
            ProjectionExpression='#visits',
            ExpressionAttributeNames={'#visits': Attr.VISITS_BY_DATE},
        )
        item = response.get('Item') or {}

        if Attr.VISITS_BY_DATE not in item:
            try:
                self.table.update_item(
                    Key={Attr.CODE: code},
                    UpdateExpression='SET #visits = :initial',
                    ConditionExpression='attribute_not_exists(#visits)',
                    ExpressionAttributeNames={'#visits': Attr.VISITS_BY_DATE},
                    ExpressionAttributeValues={':initial': {day: 1}},
                )
            except ClientError as e:
                if not is_conditional_check_failure(e):
                    raise
                logger.debug(
                    'visitsByDate was initialized concurrently. Falling back to nested increment.',
                    extra={'code': code, 'day': day},
                )
            else:
                return 1

        response = self.table.update_item(
            Key={Attr.CODE: code},
            UpdateExpression='SET #visits.#day = if_not_exists(#visits.#day, :zero) + :inc',
            ExpressionAttributeNames={'#visits': Attr.VISITS_BY_DATE, '#day': day},
            ExpressionAttributeValues={':zero': 0, ':inc': 1},
            ReturnValues='UPDATED_NEW',
        )
        return int(response['Attributes'][Attr.VISITS_BY_DATE][day])
