"""Unit tests for configuration utilities in config.py

Test coverage includes:

1. Environment variable resolution
   - Ensures app_env(), app_name(), app_prefix() and client_domain() read
     the environment correctly.

2. Configuration loading from AWS AppConfig
   - Ensures load_config() returns the active backend section of the lambda.
   - Ensures missing AppConfig identifiers raise MissingEnvironmentVariableError.
   - Ensures load_config() propagates ClientError when AppConfig calls fail.

3. Configuration loading from a local AppConfig agent
   - Ensures the local agent is used when running locally.
   - Ensures unsafe agent URLs are rejected.
"""

import os
import json
from io import BytesIO
from unittest.mock import MagicMock

import pytest
import botocore

from shortlinker.constants import ENV
from shortlinker.exceptions import MissingEnvironmentVariableError
from shortlinker.utils import config


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    """Set up environment variables for testing."""
    monkeypatch.setenv('APPCONFIG_APP_ID', 'app123')
    monkeypatch.setenv('APPCONFIG_ENV_ID', 'env123')
    monkeypatch.setenv('APPCONFIG_PROFILE_ID', 'prof123')
    monkeypatch.setenv('APP_NAME', 'shortlinker')
    monkeypatch.setenv('APP_ENV', 'dev')
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)
    monkeypatch.delenv('APPCONFIG_AGENT_URL', raising=False)


@pytest.fixture
def appconfig_payload():
    """Provide a default AppConfig payload used by multiple tests."""
    # fmt: off
    return {
        'build': 42,
        'active_backend': 'redis',
        'configs': {
            'test_lambda': {
                'redis': {
                    'host': 'monkey',
                    'port': 659595,
                    'db': 3
                }
            },
            'other_lambda': {
                'redis': {
                    'host': 'other',
                    'port': 6379,
                    'db': 0
                }
            }
        },
    }
    # fmt: on


@pytest.fixture
def mock_appconfig(monkeypatch, appconfig_payload):
    """Mock the AppConfig Data client returned by boto3.client."""
    monkey_bytes = BytesIO(json.dumps(appconfig_payload).encode('utf-8'))
    client = MagicMock()
    client.start_configuration_session.return_value = {'InitialConfigurationToken': 'monkey_token'}
    client.get_latest_configuration.return_value = {'Configuration': monkey_bytes}
    monkeypatch.setattr(config.boto3, 'client', MagicMock(return_value=client))
    return client


# -------------------------------
# 1. Environment variable resolution
# -------------------------------


def test_app_env(monkeypatch):
    """Ensure app_env() returns the lowercased value of APP_ENV"""
    monkeypatch.setitem(os.environ, 'APP_ENV', 'TEST')
    assert config.app_env() == 'test'


def test_app_env_defaults_to_local(monkeypatch):
    monkeypatch.delitem(os.environ, 'APP_ENV', raising=False)
    assert config.app_env() == 'local'


def test_app_name_not_set(monkeypatch):
    """Ensure app_name() returns None when APP_NAME is not set"""
    monkeypatch.delitem(os.environ, 'APP_NAME', raising=False)
    assert config.app_name() is None


def test_app_prefix():
    assert config.app_prefix() == 'shortlinker:dev'


def test_app_prefix_without_app_name(monkeypatch):
    monkeypatch.delitem(os.environ, 'APP_NAME', raising=False)
    assert config.app_prefix() is None


@pytest.mark.parametrize('value, expected', [('https://app.sho.rt', 'https://app.sho.rt'), ('', '*'), (None, '*')])
def test_client_domain(monkeypatch, value, expected):
    if value is None:
        monkeypatch.delenv(ENV.App.CLIENT_DOMAIN, raising=False)
    else:
        monkeypatch.setenv(ENV.App.CLIENT_DOMAIN, value)
    assert config.client_domain() == expected


# -------------------------------
# 2. Configuration loading from AWS AppConfig
# -------------------------------


def test_load_config(mock_appconfig):
    """Ensure load_config() returns only the requested lambda's active backend section."""
    result = config.load_config('test_lambda')

    assert result == {'redis': {'host': 'monkey', 'port': 659595, 'db': 3}}

    config.boto3.client.assert_called_once_with('appconfigdata')
    mock_appconfig.start_configuration_session.assert_called_once_with(
        ApplicationIdentifier='app123',
        EnvironmentIdentifier='env123',
        ConfigurationProfileIdentifier='prof123',
    )
    mock_appconfig.get_latest_configuration.assert_called_once_with(
        ConfigurationToken='monkey_token',
    )


@pytest.mark.parametrize('missing', ['APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID', 'APPCONFIG_PROFILE_ID'])
def test_load_config_missing_environment(monkeypatch, mock_appconfig, missing):
    monkeypatch.delenv(missing)

    with pytest.raises(MissingEnvironmentVariableError, match=missing):
        config.load_config('test_lambda')

    mock_appconfig.start_configuration_session.assert_not_called()


def test_missing_appconfig_raises_error(monkeypatch):
    """Ensure load_config() propagates ClientError when AppConfig returns an error."""
    mock_appconfig = MagicMock()
    mock_appconfig.start_configuration_session.side_effect = botocore.exceptions.ClientError(
        {'Error': {'Code': 'ResourceNotFoundException'}}, 'StartConfigurationSession'
    )
    monkeypatch.setattr(config.boto3, 'client', lambda service: mock_appconfig)

    with pytest.raises(botocore.exceptions.ClientError):
        config.load_config('test_lambda')


# -------------------------------
# 3. Configuration loading from a local AppConfig agent
# -------------------------------


def _urlopen_returning(payload):
    response = MagicMock()
    response.__enter__.return_value = BytesIO(json.dumps(payload).encode('utf-8'))
    return MagicMock(return_value=response)


def test_load_config_from_local_agent(monkeypatch, mock_appconfig, appconfig_payload):
    monkeypatch.setenv('APP_ENV', 'local')
    monkeypatch.setenv('APPCONFIG_AGENT_URL', 'http://localhost:2772')
    urlopen = _urlopen_returning(appconfig_payload)
    monkeypatch.setattr(config.urllib.request, 'urlopen', urlopen)

    result = config.load_config('other_lambda')

    assert result == {'redis': {'host': 'other', 'port': 6379, 'db': 0}}
    urlopen.assert_called_once_with(
        'http://localhost:2772/applications/shortlinker/environments/local/configurations/backend-config',
        timeout=5,
    )
    mock_appconfig.start_configuration_session.assert_not_called()


def test_local_agent_ignored_when_deployed(monkeypatch, mock_appconfig):
    monkeypatch.setenv('APPCONFIG_AGENT_URL', 'http://localhost:2772')
    urlopen = MagicMock()
    monkeypatch.setattr(config.urllib.request, 'urlopen', urlopen)

    config.load_config('test_lambda')

    urlopen.assert_not_called()
    mock_appconfig.start_configuration_session.assert_called_once()


@pytest.mark.parametrize(
    'agent_url',
    [
        'ftp://localhost:2772',
        'http://evil.example.com:2772',
        'http://localhost:8080',
    ],
)
def test_local_agent_rejects_unsafe_urls(monkeypatch, agent_url):
    monkeypatch.setenv('APP_ENV', 'local')
    monkeypatch.setenv('APPCONFIG_AGENT_URL', agent_url)

    with pytest.raises(ValueError):
        config.load_config('test_lambda')
