import json
import logging
from typing import Any

from shortlinker.dao.redis import UrlMappingRedisDAO, connections
from shortlinker.dao.exceptions import DataStoreError
from shortlinker.exceptions import AllocationExhaustedError, AuthError, ConfigurationError, InvalidInputError
from shortlinker.services import CodeAllocator
from shortlinker.utils import app_prefix, authenticated_owner, get_short_url, guarantee_500_response, load_config
from shortlinker.utils.responses import response_400, response_401, response_500, response_json
from shortlinker.lambdas.generate_shortcode.constants import (
    UNAUTHORIZED,
    INVALID_JSON_BODY,
    MISSING_LONG_URL,
    ALLOCATION_EXHAUSTED,
    DATA_STORE_ERROR,
    CONFIGURATION_ERROR,
    SHORTCODE_CREATED,
    SHORTCODE_REUSED,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle incoming API Gateway requests to generate short codes

    This Lambda handler follows this procedure:
    - Step 1: Extract the verified identity from the Cognito authorizer claims
    - Step 2: Extract the long URL from the request body
    - Step 3: Load configuration and connect to the mapping store
    - Step 4: Reuse or allocate a short code for the long URL
    - Step 5: Respond with the short code

    HTTP responses:
        201: New short code allocated
            shortCode: newly minted short code
            shortUrl: full short URL
            message: success message
        200: Long URL was already shortened (same body as 201)
        400: Bad client request
            message: invalid JSON body or missing 'longUrl'
        401: Unauthorized
            message: missing identity in JWT claims
        500: Internal server error
            message: configuration, data store or allocation failure

    Args:
        event (Dict[str, Any]):
            API Gateway event payload in Lambda Proxy format.
        context (Any):
            AWS Lambda context object containing runtime information.

    Returns:
        Dict[str, Any]:
            JSON-serializable response following API Gateway Lambda Proxy
            output format. Includes status code, headers, and response body.

    Example:
        >>> event = {'body': '{"longUrl": "https://example.com"}', 'requestContext': {...}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        201
        >>> json.loads(response['body'])['shortCode']
        'q0v7k2ma'
    """
    # 1- Extract the verified identity
    try:
        owner = authenticated_owner(event)
    except AuthError as e:
        logger.info('Missing identity in JWT claims. Responding with 401.', extra={'event': UNAUTHORIZED})
        return response_401(str(e))

    # 2- Extract long URL from request body
    try:
        request_body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)
    long_url = request_body.get('longUrl') if isinstance(request_body, dict) else None
    if not long_url:
        logger.info("Missing 'longUrl' in JSON body. Responding with 400.", extra={'event': MISSING_LONG_URL})
        return response_400(message='Long URL is required', error_code=MISSING_LONG_URL)

    # 3- Load configuration and connect to the mapping store
    try:
        app_config = load_config('generate_shortcode')
    except ConfigurationError:
        logger.exception('Failed to load AppConfig for generate shortcode function. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500(error_code=CONFIGURATION_ERROR)

    # 4- Reuse or allocate a short code
    try:
        redis_client = connections.connect(**app_config['redis'])
        dao = UrlMappingRedisDAO(redis_client=redis_client, prefix=app_prefix())
        mapping, created = CodeAllocator(dao).allocate_mapping(long_url, owner)
    except InvalidInputError as e:
        logger.info('Invalid allocation input. Responding with 400.', extra={'event': MISSING_LONG_URL})
        return response_400(message=str(e), error_code=MISSING_LONG_URL)
    except AllocationExhaustedError:
        logger.exception('Ran out of short code candidates. Responding with 500.', extra={'event': ALLOCATION_EXHAUSTED})
        return response_500(error_code=ALLOCATION_EXHAUSTED)
    except DataStoreError:
        logger.exception('Mapping store unavailable. Responding with 500.', extra={'event': DATA_STORE_ERROR})
        return response_500(error_code=DATA_STORE_ERROR)

    # 5- Respond with the short code
    logger.info(
        'Short code %s. Responding with %s.',
        'allocated' if created else 'reused',
        201 if created else 200,
        extra={'shortcode': mapping.shortcode, 'event': SHORTCODE_CREATED if created else SHORTCODE_REUSED},
    )
    return response_json(
        201 if created else 200,
        {
            'shortCode': mapping.shortcode,
            'shortUrl': get_short_url(mapping.shortcode, event),
            'message': 'Short URL generated successfully',
        },
    )
