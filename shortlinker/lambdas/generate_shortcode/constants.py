# Event codes (logged as `event` and returned as `errorCode`)
UNAUTHORIZED = 'UNAUTHORIZED'
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
MISSING_LONG_URL = 'MISSING_LONG_URL'
ALLOCATION_EXHAUSTED = 'ALLOCATION_EXHAUSTED'
DATA_STORE_ERROR = 'DATA_STORE_ERROR'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
SHORTCODE_CREATED = 'SHORTCODE_CREATED'
SHORTCODE_REUSED = 'SHORTCODE_REUSED'
