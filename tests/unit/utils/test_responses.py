"""Unit tests for API Gateway response builders in responses.py.

Test coverage includes:

1. JSON responses
   - Content type and CORS headers on every JSON response.
   - 400, 401 and 500 message and error code rendering.

2. Redirect and not found responses
   - 302 carries the Location header and an empty body.
   - 404 renders the HTML page linking back to the frontend.

3. guarantee_500_response() behavior
   - 3.1. Unhandled exceptions become a 500 response when deployed.
   - 3.2. Unhandled exceptions are re-raised when running locally.
"""

import json

import pytest

from shortlinker.constants import ENV
from shortlinker.utils.responses import (
    cors_headers,
    guarantee_500_response,
    response_302,
    response_400,
    response_401,
    response_404_page,
    response_500,
    response_json,
)


@pytest.fixture(autouse=True)
def _client_domain(monkeypatch):
    monkeypatch.setenv(ENV.App.CLIENT_DOMAIN, 'https://app.sho.rt')


# -------------------------------
# 1. JSON responses
# -------------------------------


def test_cors_headers():
    headers = cors_headers()
    assert headers['Access-Control-Allow-Origin'] == 'https://app.sho.rt'
    assert headers['Access-Control-Allow-Credentials'] == 'true'
    assert headers['Access-Control-Allow-Methods'] == 'OPTIONS,POST,GET'
    assert 'Authorization' in headers['Access-Control-Allow-Headers']


def test_cors_headers_default_to_any_origin(monkeypatch):
    monkeypatch.delenv(ENV.App.CLIENT_DOMAIN, raising=False)
    headers = cors_headers()

    assert headers['Access-Control-Allow-Origin'] == '*'
    assert 'Access-Control-Allow-Credentials' not in headers


def test_response_json():
    response = response_json(201, {'shortCode': 'k3x9a0qz'})

    assert response['statusCode'] == 201
    assert response['headers']['Content-Type'] == 'application/json'
    assert response['headers']['Access-Control-Allow-Origin'] == 'https://app.sho.rt'
    assert json.loads(response['body']) == {'shortCode': 'k3x9a0qz'}


def test_response_json_with_list_body():
    assert json.loads(response_json(200, [])['body']) == []


@pytest.mark.parametrize(
    'message, error_code, expected',
    [
        (None, None, {'message': 'Bad Request'}),
        ('invalid JSON body', None, {'message': 'Bad Request (invalid JSON body)'}),
        ('Long URL is required', 'MISSING_LONG_URL', {'message': 'Bad Request (Long URL is required)', 'errorCode': 'MISSING_LONG_URL'}),
    ],
)
def test_response_400(message, error_code, expected):
    response = response_400(message=message, error_code=error_code)
    assert response['statusCode'] == 400
    assert json.loads(response['body']) == expected


def test_response_401():
    assert json.loads(response_401()['body']) == {'message': 'Unauthorized Access!'}
    assert json.loads(response_401('nope')['body']) == {'message': 'nope'}
    assert response_401()['statusCode'] == 401


def test_response_500():
    response = response_500(message='Could not fetch URLs', error_code='DATA_STORE_ERROR')
    assert response['statusCode'] == 500
    assert json.loads(response['body']) == {
        'message': 'Internal Server Error (Could not fetch URLs)',
        'errorCode': 'DATA_STORE_ERROR',
    }


# -------------------------------
# 2. Redirect and not found responses
# -------------------------------


def test_response_302():
    response = response_302(location='https://example.com/page')
    assert response == {
        'statusCode': 302,
        'headers': {'Location': 'https://example.com/page'},
        'body': '',
    }


def test_response_404_page():
    response = response_404_page()

    assert response['statusCode'] == 404
    assert response['headers']['Content-Type'].startswith('text/html')
    assert '404 - Link Not Found!' in response['body']
    assert '<a href="https://app.sho.rt">Go to Homepage</a>' in response['body']


def test_response_404_page_without_client_domain(monkeypatch):
    monkeypatch.delenv(ENV.App.CLIENT_DOMAIN, raising=False)
    assert '<a href="/">' in response_404_page()['body']


def test_response_404_page_escapes_homepage(monkeypatch):
    monkeypatch.setenv(ENV.App.CLIENT_DOMAIN, 'https://x.com/"><script>')
    body = response_404_page()['body']
    assert '<script>' not in body
    assert '&quot;&gt;&lt;script&gt;' in body


# -------------------------------
# 3.1. guarantee_500_response() when deployed
# -------------------------------


def test_guarantee_500_response(monkeypatch):
    """3.1. Faulty lambda handler returns 500 response when not running locally."""
    monkeypatch.setattr('shortlinker.utils.responses.running_locally', lambda: False)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    response = faulty_lambda_handler({}, None)
    body = json.loads(response['body'])

    assert response['statusCode'] == 500
    assert body['message'] == 'Internal Server Error'
    assert body['errorCode'] == 'UNKNOWN_INTERNAL_SERVER_ERROR'


def test_guarantee_500_response_passes_through(monkeypatch):
    monkeypatch.setattr('shortlinker.utils.responses.running_locally', lambda: False)

    @guarantee_500_response
    def lambda_handler(event, context):
        return response_302(location='https://example.com')

    assert lambda_handler({}, None)['statusCode'] == 302


# -------------------------------
# 3.2. guarantee_500_response() when running locally
# -------------------------------


def test_guarantee_500_response_reraises_when_running_locally(monkeypatch):
    """3.2. Faulty lambda handler reraises the original exception when running locally."""
    monkeypatch.setattr('shortlinker.utils.responses.running_locally', lambda: True)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError, match='boom'):
        faulty_lambda_handler({}, None)
