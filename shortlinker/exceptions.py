class ShortLinkerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shortlinker_error'


class InvalidInputError(ShortLinkerError):
    """Raised when a request carries a missing or empty argument."""

    error_code = 'app:invalid_input_error'


class AllocationExhaustedError(ShortLinkerError):
    """Raised when no unique short code could be inserted within the retry budget."""

    error_code = 'app:allocation_exhausted_error'


class AuthError(ShortLinkerError):
    """Raised when a request carries no verified identity."""

    error_code = 'auth:auth_error'


class ConfigurationError(ShortLinkerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'
