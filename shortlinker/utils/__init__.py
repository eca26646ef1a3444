from shortlinker.utils.config import app_env, app_name, app_prefix, client_domain, load_config
from shortlinker.utils.helpers import base_url, get_short_url, require_environment
from shortlinker.utils.responses import guarantee_500_response
from shortlinker.utils.shortener import generate_shortcode
from shortlinker.utils.logging import initialize_logging
from shortlinker.utils.auth import authenticated_owner


__all__ = [
    'generate_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'client_domain',
    'load_config',
    'base_url',
    'get_short_url',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
    'authenticated_owner',
]
