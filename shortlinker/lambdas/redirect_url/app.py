import logging
from typing import Any

from shortlinker.dao.redis import UrlMappingRedisDAO, connections
from shortlinker.dao.exceptions import DataStoreError
from shortlinker.exceptions import ConfigurationError
from shortlinker.services import RedirectResolver
from shortlinker.utils import app_prefix, get_short_url, guarantee_500_response, load_config
from shortlinker.utils.responses import response_302, response_400, response_404_page, response_500
from shortlinker.lambdas.redirect_url.constants import (
    MISSING_SHORTCODE,
    SHORT_URL_NOT_FOUND,
    DATA_STORE_ERROR,
    CONFIGURATION_ERROR,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Handle incoming API Gateway requests to redirect short URLs

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Extract shortcode from request path
    - Step 2: Resolve the shortcode (counts the visit)
    - Step 3: Redirect client to the long URL

    The endpoint is public: no identity is required.

    HTTP responses:
        302: Successful redirect
            headers:
                Location: long URL destination
        400: Bad client request
            message: missing shortcode in path parameters
        404: HTML "Link Not Found" page
        500: Internal server error

    Args:
        event (dict):
            API Gateway event payload containing the shortcode path parameter.
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        dict:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'shortcode': 'q0v7k2ma'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 1- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if not shortcode:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return response_400(message="missing 'shortcode' in path", error_code=MISSING_SHORTCODE)
    logger.debug('Client requested short URL %s.', get_short_url(shortcode, event))

    try:
        app_config = load_config('redirect_url')
    except ConfigurationError:
        logger.exception('Failed to load AppConfig for redirect URL function. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500(error_code=CONFIGURATION_ERROR)

    # 2- Resolve the shortcode
    try:
        redis_client = connections.connect(**app_config['redis'])
        dao = UrlMappingRedisDAO(redis_client=redis_client, prefix=app_prefix())
        long_url = RedirectResolver(dao).resolve(shortcode)
    except DataStoreError:
        logger.exception('Mapping store unavailable. Responding with 500.', extra={'shortcode': shortcode, 'event': DATA_STORE_ERROR})
        return response_500(error_code=DATA_STORE_ERROR)

    if long_url is None:
        logger.info('Short URL record not found in database. Responding with 404.', extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND})
        return response_404_page()

    # 3- Redirect client to long URL
    logger.info('Redirecting client to long URL. Responding with 302.', extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS})
    return response_302(location=long_url)
