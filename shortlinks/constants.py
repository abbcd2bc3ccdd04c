from enum import StrEnum


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class DynamoDB(StrEnum):
        TABLE_NAME = 'TABLE_NAME'

    class LocalStack(StrEnum):
        ENDPOINT = 'LOCALSTACK_ENDPOINT'  # usually http://localstack:4566


class Attr:
    """Short link record attribute names."""

    CODE = 'code'
    ORIGINAL_URL = 'originalUrl'
    TOTAL_VISITS = 'totalVisits'
    VISITS_BY_DATE = 'visitsByDate'


# Visits are bucketed by calendar day in this timezone
VISITS_TIMEZONE = 'America/Bogota'
VISITS_DATE_FORMAT = '%Y-%m-%d'

# CORS headers attached to every response
CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET, POST, PUT, DELETE, OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type, X-Amz-Date, Authorization, X-Api-Key, X-Amz-Security-Token, X-Amz-User-Agent',
    'Access-Control-Max-Age': '86400',
}

PREFLIGHT_METHOD = 'OPTIONS'

# Log event codes
PREFLIGHT_REQUEST = 'PREFLIGHT_REQUEST'
MISSING_CODE = 'MISSING_CODE'
SHORT_LINK_NOT_FOUND = 'SHORT_LINK_NOT_FOUND'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
VISIT_TRACKING_FAILED = 'VISIT_TRACKING_FAILED'
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
