"""API Gateway proxy responses returned by the redirect handler.

Every response carries the same CORS headers. Error responses carry a JSON
body of the form {"error": "<message>"}; preflight and redirect responses have
an empty body.
"""

import json

from shortlinks.types import LambdaResponse
from shortlinks.constants import CORS_HEADERS


def _response(status_code: int, headers: dict[str, str] | None = None, body: str = '') -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {**CORS_HEADERS, **(headers or {})},
        'body': body,
    }


def error_response(status_code: int, message: str) -> LambdaResponse:
    return _response(
        status_code,
        headers={'Content-Type': 'application/json'},
        body=json.dumps({'error': message}),
    )


def response_200_preflight() -> LambdaResponse:
    return _response(200)


def response_302(*, location: str) -> LambdaResponse:
    return _response(
        302,
        headers={
            'Location': location,
            'Cache-Control': 'no-cache',
        },
    )


def response_400(message: str) -> LambdaResponse:
    return error_response(400, message)


def response_404(message: str) -> LambdaResponse:
    return error_response(404, message)


def response_500(message: str | None = None) -> LambdaResponse:
    base = 'Internal server error'
    return error_response(500, base if not message else f'{base}: {message}')
