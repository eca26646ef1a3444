# Event codes (logged as `event` and returned as `errorCode`)
UNAUTHORIZED = 'UNAUTHORIZED'
DATA_STORE_ERROR = 'DATA_STORE_ERROR'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
LIST_SUCCESS = 'LIST_SUCCESS'
