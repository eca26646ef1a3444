"""Abstract base class for UrlMapping data access objects (DAOs).

This class establishes a consistent contract for all UrlMapping DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, MongoDB, PostgreSQL).

Responsibilities:
    - Provide an interface for inserting and looking up UrlMappingModel objects.
    - Provide an atomic visit counter per mapping.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from shortlinker.models import UrlMappingModel
        >>> from shortlinker.dao.redis import UrlMappingRedisDAO

        >>> dao = UrlMappingRedisDAO(...)

        >>> mapping = UrlMappingModel(
        ...     long_url="https://example.com/blog/article-123",
        ...     shortcode="k3x9a0qz",
        ...     owner="a@b.com",
        ...     created_at=datetime.now(UTC),
        ... )
        >>> dao.insert(mapping)

        >>> dao.find_by_shortcode("k3x9a0qz").long_url
        'https://example.com/blog/article-123'

        >>> dao.increment_visits("k3x9a0qz")
        1
"""

from abc import ABC, abstractmethod

from shortlinker.models import UrlMappingModel


class UrlMappingBaseDAO(ABC):
    """Interface for UrlMapping data access objects (DAOs).

    Methods:
        find_by_long_url(long_url: str, **kwargs) -> UrlMappingModel | None:
            Look up the mapping registered for a long URL.
            Raises DataStoreError on connection or read failure.

        find_by_shortcode(shortcode: str, **kwargs) -> UrlMappingModel | None:
            Look up the mapping registered under a short code.
            Raises DataStoreError on connection or read failure.

        insert(mapping: UrlMappingModel, **kwargs) -> UrlMappingBaseDAO:
            Insert a new UrlMappingModel into the data store.
            Raises MappingAlreadyExistsError if the short code already exists.
            Raises DataStoreError on connection or write failure.

        increment_visits(shortcode: str, **kwargs) -> int:
            Atomically increment the visit counter of a mapping.
            Raises MappingNotFoundError if the short code does not exist.
            Raises DataStoreError on connection or write failure.

        list_by_owner(owner: str, **kwargs) -> list[UrlMappingModel]:
            Return all mappings created by an owner.
            Raises DataStoreError on connection or read failure.

    Subclassing:
        Datastore-specific implementations (e.g., UrlMappingRedisDAO) must extend
        this class and implement all abstract methods.

    NOTE:
        - Short code uniqueness must be enforced by the data store itself.
          Checking for existence before writing is not enough, since two
          concurrent writers can both pass the check.
        - Mappings never expire and are never deleted.
    """

    @abstractmethod
    def find_by_long_url(self, long_url: str, **kwargs) -> UrlMappingModel | None:
        """Retrieve the UrlMappingModel registered for a long URL.

        Args:
            long_url (str):
                The original URL, compared as an opaque string.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlMappingModel | None: The mapping if found, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def find_by_shortcode(self, shortcode: str, **kwargs) -> UrlMappingModel | None:
        """Retrieve a UrlMappingModel by its short code.

        Args:
            shortcode (str):
                The short code of the mapping to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlMappingModel | None: The mapping if found, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def insert(self, mapping: UrlMappingModel, **kwargs) -> 'UrlMappingBaseDAO':
        """Insert a new UrlMappingModel into the data store.

        Args:
            mapping (UrlMappingModel):
                The UrlMappingModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlMappingBaseDAO: self (for method chaining)

        Raises:
            MappingAlreadyExistsError:
                If a mapping with the same short code already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def increment_visits(self, shortcode: str, **kwargs) -> int:
        """Atomically increment the visit counter of a mapping by 1.

        Implementations must perform the increment as a single store operation,
        so concurrent callers never lose updates.

        Args:
            shortcode (str):
                The short code of the mapping.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The visit counter after the increment.

        Raises:
            MappingNotFoundError:
                If no mapping with the given short code exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def list_by_owner(self, owner: str, **kwargs) -> list[UrlMappingModel]:
        """Retrieve all mappings created by an owner.

        The order of the returned mappings is not guaranteed.

        Args:
            owner (str):
                Verified identity of the mapping creator.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            list[UrlMappingModel]: The owner's mappings (possibly empty).

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
