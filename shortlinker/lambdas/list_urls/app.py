import logging
from typing import Any

from shortlinker.dao.redis import UrlMappingRedisDAO, connections
from shortlinker.dao.exceptions import DataStoreError
from shortlinker.exceptions import AuthError, ConfigurationError
from shortlinker.utils import app_prefix, authenticated_owner, guarantee_500_response, load_config
from shortlinker.utils.responses import response_401, response_500, response_json
from shortlinker.lambdas.list_urls.constants import (
    UNAUTHORIZED,
    DATA_STORE_ERROR,
    CONFIGURATION_ERROR,
    LIST_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle incoming API Gateway requests listing the caller's mappings

    HTTP responses:
        200: JSON array of the caller's mappings
            (longUrl, shortCode, owner, createdAt, totalVisits)
        401: Unauthorized
        500: Internal server error

    Example:
        >>> response = lambda_handler(event, None)
        >>> json.loads(response['body'])[0]['shortCode']
        'q0v7k2ma'
    """
    try:
        owner = authenticated_owner(event)
    except AuthError as e:
        logger.info('Missing identity in JWT claims. Responding with 401.', extra={'event': UNAUTHORIZED})
        return response_401(str(e))

    try:
        app_config = load_config('list_urls')
    except ConfigurationError:
        logger.exception('Failed to load AppConfig for list URLs function. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500(error_code=CONFIGURATION_ERROR)

    try:
        redis_client = connections.connect(**app_config['redis'])
        dao = UrlMappingRedisDAO(redis_client=redis_client, prefix=app_prefix())
        mappings = dao.list_by_owner(owner)
    except DataStoreError:
        logger.exception('Mapping store unavailable. Responding with 500.', extra={'event': DATA_STORE_ERROR})
        return response_500(message='Could not fetch URLs', error_code=DATA_STORE_ERROR)

    logger.info('Listed owner mappings. Responding with 200.', extra={'count': len(mappings), 'event': LIST_SUCCESS})
    return response_json(200, [mapping.to_dict() for mapping in mappings])
