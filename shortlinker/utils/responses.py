"""API Gateway (Lambda Proxy) response builders

Every JSON response carries CORS headers allowing the frontend origin
(`CLIENT_DOMAIN`).

Functions:
    cors_headers() -> dict
    response_json(status_code, body) -> dict
    response_400 / response_401 / response_500 -> dict
    response_404_page() -> dict
    response_302(location) -> dict
    guarantee_500_response(handler) -> handler
"""

import json
import html
import logging
import functools
from collections.abc import Callable
from typing import Any

from shortlinker.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from shortlinker.utils.config import client_domain
from shortlinker.utils.runtime import running_locally


logger = logging.getLogger(__name__)


NOT_FOUND_PAGE = """<html>
  <body style="text-align: center; padding-top: 50px; font-family: sans-serif;">
    <h1 style="color: #ff4d4d;">404 - Link Not Found!</h1>
    <p>Sorry, the short link you are looking for is invalid or has expired.</p>
    <a href="{homepage}">Go to Homepage</a>
  </body>
</html>
"""


def cors_headers() -> dict:
    origin = client_domain()
    headers = {
        'Access-Control-Allow-Origin': origin,
        'Access-Control-Allow-Headers': 'Content-Type,Authorization',
        'Access-Control-Allow-Methods': 'OPTIONS,POST,GET',
    }
    # Browsers reject credentials with a wildcard origin
    if origin != '*':
        headers['Access-Control-Allow-Credentials'] = 'true'
    return headers


def response_json(status_code: int, body: Any) -> dict:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **cors_headers()},
        'body': json.dumps(body),
    }


def response_400(message: str | None = None, error_code: str | None = None) -> dict:
    base = 'Bad Request'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return response_json(400, body)


def response_401(message: str | None = None) -> dict:
    return response_json(401, {'message': message or 'Unauthorized Access!'})


def response_500(message: str | None = None, error_code: str | None = None) -> dict:
    base = 'Internal Server Error'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return response_json(500, body)


def response_404_page() -> dict:
    homepage = client_domain()
    homepage = '/' if homepage == '*' else homepage
    return {
        'statusCode': 404,
        'headers': {'Content-Type': 'text/html; charset=utf-8'},
        'body': NOT_FOUND_PAGE.format(homepage=html.escape(homepage, quote=True)),
    }


def response_302(*, location: str) -> dict:
    return {
        'statusCode': 302,
        'headers': {'Location': location},
        'body': '',  # no body needed for redirects
    }


def guarantee_500_response(handler: Callable[..., dict]) -> Callable[..., dict]:
    """Decorator: convert any unhandled exception into an HTTP 500 response

    When running locally the exception is re-raised, so the full traceback
    reaches the developer.

    Example:
        >>> @guarantee_500_response
        ... def lambda_handler(event, context):
        ...     raise RuntimeError('boom')
        >>> lambda_handler({}, None)['statusCode']
        500
    """

    @functools.wraps(handler)
    def wrapper(event: dict, context: Any) -> dict:
        try:
            return handler(event, context)
        except Exception as e:
            if running_locally():
                raise
            logger.exception(
                'Unhandled exception in Lambda handler. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR, 'error': e.__class__.__name__},
            )
            return response_500(error_code=UNKNOWN_INTERNAL_SERVER_ERROR)

    return wrapper
