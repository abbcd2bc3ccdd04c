"""Utility functions for application configuration management.

The redirect Lambda is configured through environment variables only, read
once when the handler builds its data store client (cold start). The only
required setting is the DynamoDB table name; under `sam local` the client is
pointed at LocalStack instead of AWS. Settings are returned in the shape
expected by the DAO constructor:

    {
        "table_name": "short-links",
        "endpoint_url": None
    }

Typical usage inside a Lambda handler:
    >>> from shortlinks.utils.config import load_config
    >>> config = load_config()
    >>> config['table_name']
    'short-links'
"""

import os
import logging

from shortlinks.types import LambdaConfiguration
from shortlinks.constants import ENV
from shortlinks.utils.helpers import require_environment
from shortlinks.utils.runtime import running_locally


logger = logging.getLogger(__name__)


@require_environment(ENV.DynamoDB.TABLE_NAME)
def load_config() -> LambdaConfiguration:
    """Load the DynamoDB configuration from the environment.

    Returns:
        dict: {'table_name': <table>, 'endpoint_url': <LocalStack endpoint or None>}

    Raises:
        MissingEnvironmentVariableError:
            If TABLE_NAME is missing or empty.
    """
    config = {
        'table_name': os.environ[ENV.DynamoDB.TABLE_NAME],
        # LocalStack stands in for DynamoDB under sam local
        'endpoint_url': os.environ.get(ENV.LocalStack.ENDPOINT) if running_locally() else None,
    }
    logger.debug('Loaded store configuration from environment.', extra={'tableName': config['table_name']})
    return config
