import functools
import logging

from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse, LambdaConfiguration
from shortlinks.constants import (
    PREFLIGHT_METHOD,
    PREFLIGHT_REQUEST,
    MISSING_CODE,
    SHORT_LINK_NOT_FOUND,
    REDIRECT_SUCCESS,
    VISIT_TRACKING_FAILED,
    VISITS_TIMEZONE,
)
from shortlinks.analytics import increment_total, increment_for_today
from shortlinks.dao.base import ShortLinkBaseDAO
from shortlinks.dao.dynamodb import ShortLinkDynamoDBDAO
from shortlinks.dao.exceptions import ShortLinkNotFoundError
from shortlinks.utils import (
    load_config,
    get_http_method,
    get_path_parameter,
    guarantee_500_response,
)
from shortlinks.utils.responses import response_200_preflight, response_302, response_400, response_404


logger = logging.getLogger(__name__)


class RedirectResolver:
    """Resolve short codes into redirects and record visits

    The resolver holds the data store client for the lifetime of the Lambda
    execution environment; it keeps no other state between requests.

    Attributes:
        dao (ShortLinkBaseDAO):
            Data store access for short link records.
        timezone (str):
            Timezone in which visits are bucketed by date.
    """

    def __init__(self, dao: ShortLinkBaseDAO, timezone: str = VISITS_TIMEZONE):
        self.dao = dao
        self.timezone = timezone

    @guarantee_500_response
    def handle(self, event: LambdaEvent) -> LambdaResponse:
        """Handle one API Gateway request

        This handler follows this procedure:
        - Step 1: Answer CORS preflight requests
        - Step 2: Extract code from request path
        - Step 3: Get short link record from database
        - Step 4: Record the visit (best-effort)
        - Step 5: Redirect client to original URL

        HTTP responses:
            200: CORS preflight (OPTIONS)
            302: Successful redirect
                headers:
                    Location: original URL
                    Cache-Control: no-cache
            400: Missing or blank code
                error: "Code parameter is required"
            404: Unknown code
                error: "URL not found for code: <code>"
            500: Internal server error
                error: "Internal server error: <error>"

        Args:
            event (dict):
                API Gateway event payload containing the `code` path parameter.

        Returns:
            dict:
                API Gateway-compatible response including statusCode, headers, and body.

        Example:
            >>> event = {'requestContext': {'http': {'method': 'GET'}}, 'pathParameters': {'code': 'abc'}}
            >>> response = resolver.handle(event)
            >>> response['statusCode']
            302
            >>> response['headers']['Location']
            'https://example.com'
        """
        # 1- Answer preflight requests before anything else
        if get_http_method(event) == PREFLIGHT_METHOD:
            logger.info('Handling OPTIONS preflight request. Responding with 200.', extra={'event': PREFLIGHT_REQUEST})
            return response_200_preflight()

        logger.debug('Received event.', extra={'apigwEvent': event})

        # 2- Extract code from request's path
        code = get_path_parameter(event, 'code')
        if code is None or not code.strip():
            logger.info('Missing "code" in path. Responding with 400.', extra={'event': MISSING_CODE})
            return response_400('Code parameter is required')
        logger.debug('Client requested short link.', extra={'code': code})

        # 3- Get short link record from database
        try:
            short_link = self.dao.get(code)
        except ShortLinkNotFoundError:
            logger.info(
                'Short link not found in database. Responding with 404.',
                extra={'code': code, 'event': SHORT_LINK_NOT_FOUND},
            )
            return response_404(f'URL not found for code: {code}')

        response = response_302(location=short_link.original_url)

        # 4- Record the visit; failures never change the redirect
        self.track_visit(code)

        # 5- Redirect client to original URL
        logger.info(
            'Redirecting client to original URL. Responding with 302.',
            extra={'code': code, 'originalUrl': short_link.original_url, 'event': REDIRECT_SUCCESS},
        )
        return response

    def track_visit(self, code: str) -> None:
        updates = (
            increment_total(self.dao, code),
            increment_for_today(self.dao, code, self.timezone),
        )
        for update in updates:
            if not update.ok:
                logger.warning(
                    'Failed to record visit. Ignoring.',
                    extra={
                        'code': code,
                        'operation': update.operation,
                        'day': update.day,
                        'error': str(update.error),
                        'event': VISIT_TRACKING_FAILED,
                    },
                )


def build_short_link_dao(config: LambdaConfiguration) -> ShortLinkBaseDAO:
    """Create the DynamoDB short link DAO

    Args:
        config (dict):
            Output of load_config(), i.e. {'table_name': ..., 'endpoint_url': ...}.
    """
    dynamodb_config = {f'dynamodb_{k}': v for k, v in config.items()}
    return ShortLinkDynamoDBDAO(**dynamodb_config)


@functools.cache
def get_resolver() -> RedirectResolver:
    """Build the resolver once per Lambda execution environment (cold start)."""
    config = load_config()
    logger.debug('Creating short link DAO.', extra={'tableName': config['table_name']})
    return RedirectResolver(build_short_link_dao(config))


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect short links

    See RedirectResolver.handle() for the request procedure and responses.
    Configuration errors while building the resolver surface as 500 responses.

    Args:
        event (dict):
            API Gateway event payload containing the `code` path parameter.
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        dict:
            API Gateway-compatible response including statusCode, headers, and body.
    """
    return get_resolver().handle(event)
