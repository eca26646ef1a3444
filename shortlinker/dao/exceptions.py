"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    MappingNotFoundError:
        Raised when a UrlMappingModel is not found in the data store.

    MappingAlreadyExistsError:
        Raised when attempting to insert a UrlMappingModel whose short code is taken.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

Example:
    >>> from shortlinker.dao.exceptions import MappingNotFoundError
    >>> raise MappingNotFoundError("Mapping with short code 'k3x9a0qz' not found.")
    Traceback (most recent call last):
        ...
    shortlinker.dao.exceptions.MappingNotFoundError: Mapping with short code 'k3x9a0qz' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class MappingNotFoundError(DAOError):
    """Exception raised when a UrlMappingModel is not found in the data store."""

    pass


class MappingAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a UrlMappingModel whose short code already exists in the data store."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    pass
