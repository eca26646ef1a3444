import string
from enum import StrEnum


class Shortcode:
    """Short code format."""

    LENGTH = 8
    ALPHABET = string.ascii_lowercase + string.digits  # 36 symbols: [a-z0-9]
    MAX_ALLOCATION_ATTEMPTS = 5  # Fresh candidates tried before giving up


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'
        CLIENT_DOMAIN = 'CLIENT_DOMAIN'  # frontend origin, used for CORS and the 404 page

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
