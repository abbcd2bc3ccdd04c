from shortlinks.utils.config import load_config
from shortlinks.utils.helpers import (
    get_http_method,
    get_path_parameter,
    today_in_timezone,
    require_environment,
    guarantee_500_response,
)
from shortlinks.utils.logging import initialize_logging


__all__ = [
    'load_config',
    'get_http_method',
    'get_path_parameter',
    'today_in_timezone',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
