"""Helper utilities for AWS lambda functions.

Functions:
    get_http_method() -> str
        Extract the HTTP method from a REST (v1) or HTTP (v2) API Gateway event
    get_path_parameter() -> str | None
        Extract a single path parameter from an API Gateway event
    today_in_timezone() -> str
        Current calendar date in a fixed timezone, formatted YYYY-MM-DD
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(func) -> Callable
        Decorator: Turn any unhandled exception into a 500 response

Example:
    Typical usage inside a Lambda handler:

        >>> from shortlinks.utils.helpers import get_http_method
        >>> event = {"requestContext": {"http": {"method": "OPTIONS"}}}
        >>> get_http_method(event)
        'OPTIONS'

        >>> get_path_parameter({"pathParameters": None}, "code") is None
        True
"""

import os
import logging
import functools
from datetime import datetime
from zoneinfo import ZoneInfo
from collections.abc import Callable

from shortlinks.types import LambdaEvent
from shortlinks.constants import VISITS_DATE_FORMAT, UNKNOWN_INTERNAL_SERVER_ERROR
from shortlinks.exceptions import MissingEnvironmentVariableError
from shortlinks.utils.responses import response_500


logger = logging.getLogger(__name__)


def get_http_method(event: LambdaEvent) -> str:
    """Extract the HTTP method from an API Gateway event

    HTTP APIs (payload v2) carry it under requestContext.http.method,
    REST APIs (payload v1) under httpMethod.

    Returns:
        str: upper-cased HTTP method, '' if the event carries none.
    """
    http = (event.get('requestContext') or {}).get('http') or {}
    method = http.get('method') or event.get('httpMethod') or ''
    return method.upper()


def get_path_parameter(event: LambdaEvent, name: str) -> str | None:
    # API Gateway sends "pathParameters": null when the route has none
    return (event.get('pathParameters') or {}).get(name)


def today_in_timezone(timezone: str) -> str:
    """Return today's calendar date in `timezone`, formatted YYYY-MM-DD

    Example:
        >>> # 2025-10-15T03:00:00Z
        >>> today_in_timezone('America/Bogota')
        '2025-10-14'
    """
    return datetime.now(ZoneInfo(timezone)).strftime(VISITS_DATE_FORMAT)


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('TABLE_NAME')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'TABLE_NAME'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(func: Callable) -> Callable:
    """Decorator: respond with 500 on any unhandled exception

    The response body carries the exception text:
        {"error": "Internal server error: <error>"}
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.exception(
                'Unhandled error. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR, 'errorType': type(e).__name__},
            )
            return response_500(str(e))

    return wrapper
