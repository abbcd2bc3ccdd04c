"""DynamoDB mixin providing shared table initialization.

Responsibilities:
    - Initialize a DynamoDB Table resource (or reuse an injected one)

Classes:
    - DynamoDBTableMixin: Base mixin to inject DynamoDB table setup.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortLinkDynamoDBDAO(DynamoDBTableMixin, ShortLinkBaseDAO):
        ...     pass
        ...
        >>> dao = ShortLinkDynamoDBDAO(dynamodb_table_name='short-links')
        >>> dao.table.name
        'short-links'
"""

from typing import Any, Optional

import boto3


class DynamoDBTableMixin:
    """Mixin DynamoDB table setup for DynamoDB-backed DAOs.

    Attributes:
        table (boto3.resources.base.ServiceResource):
            DynamoDB Table resource used by subclasses.

        table_name (str):
            Name of the DynamoDB table.
    """

    def __init__(
        self,
        dynamodb_table_name: Optional[str] = None,
        dynamodb_region_name: Optional[str] = None,
        dynamodb_endpoint_url: Optional[str] = None,
        dynamodb_resource: Optional[Any] = None,
        dynamodb_table: Optional[Any] = None,
    ):
        """Initialize a DynamoDB-based DAO

        The option is given to either use an existing Table resource, an existing
        DynamoDB service resource, or create one from connection parameters.

        Args:
            dynamodb_table_name (Optional[str]):
                Name of the table holding short link records. Required unless
                `dynamodb_table` is given.

            dynamodb_region_name (Optional[str]):
                AWS region of the table. Defaults to the boto3 session region.

            dynamodb_endpoint_url (Optional[str]):
                Custom endpoint URL (e.g. LocalStack). Defaults to AWS.

            dynamodb_resource (Optional[boto3.resources.base.ServiceResource]):
                Pre-initialized DynamoDB service resource.

            dynamodb_table (Optional[boto3.resources.base.ServiceResource]):
                Pre-initialized Table resource. If None, a new one is created.

        Raises:
            ValueError:
                If neither a table nor a table name is provided.
        """
        if dynamodb_table is None:
            if not dynamodb_table_name:
                raise ValueError('A DynamoDB table name is required when no table resource is provided.')
            if dynamodb_resource is None:
                dynamodb_resource = boto3.resource(
                    'dynamodb',
                    region_name=dynamodb_region_name,
                    endpoint_url=dynamodb_endpoint_url,
                )
            dynamodb_table = dynamodb_resource.Table(dynamodb_table_name)

        self.table = dynamodb_table
        self.table_name = dynamodb_table_name or dynamodb_table.name
