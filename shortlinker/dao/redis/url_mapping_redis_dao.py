"""Data Access Object (DAO) implementation for managing URL mappings in Redis

This module provides a Redis-based implementation of UrlMappingBaseDAO.

Responsibilities:
    - Insert mappings while enforcing short code uniqueness inside Redis;
    - Look up mappings by short code and by long URL;
    - Atomically count visits per mapping;
    - List mappings per owner;
    - Provide error handling and raise appropriate DAO exceptions.

Redis layout (all keys namespaced by the optional prefix):
    links:<shortcode>          HASH    long_url, owner, created_at, total_visits
    urls:<xxh3-128(long_url)>  STRING  shortcode of the first mapping of that long URL
    owners:<owner>:links       LIST    shortcodes in insertion order

Classes:
    UrlMappingRedisDAO:
        DAO for storing and retrieving UrlMappingModel in a Redis datastore.

Example:
    >>> from shortlinker.models import UrlMappingModel
    >>> from shortlinker.dao.redis import UrlMappingRedisDAO

    >>> dao = UrlMappingRedisDAO(prefix="app:dev")

    >>> mapping = UrlMappingModel(
    ...     long_url="https://example.com/page",
    ...     shortcode="k3x9a0qz",
    ...     owner="a@b.com",
    ...     created_at=datetime.now(UTC),
    ... )
    >>> dao.insert(mapping)
    <UrlMappingRedisDAO>

    >>> dao.find_by_long_url("https://example.com/page").shortcode
    'k3x9a0qz'

    >>> dao.increment_visits("k3x9a0qz")
    1
"""

from datetime import datetime

import redis
from beartype import beartype

from shortlinker.models import UrlMappingModel
from shortlinker.dao.base import UrlMappingBaseDAO
from shortlinker.dao.redis.mixins import RedisClientMixin
from shortlinker.dao.redis.helpers import handle_redis_error
from shortlinker.dao.exceptions import MappingAlreadyExistsError, MappingNotFoundError


# KEYS[1]: links:<shortcode>, ARGV[1]: visits field name
# Returns nil (None) when the mapping doesn't exist, so HINCRBY never creates a stray hash.
INCREMENT_VISITS_SCRIPT = """
if redis.call('EXISTS', KEYS[1]) == 0 then
    return false
end
return redis.call('HINCRBY', KEYS[1], ARGV[1], 1)
"""


class UrlMappingRedisDAO(RedisClientMixin, UrlMappingBaseDAO):
    """Redis-based Data Access Object (DAO) for managing URL mappings

    This class implements the UrlMappingBaseDAO interface using Redis as a data store.
    It expects a client created with `decode_responses=True`.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        find_by_long_url(long_url: str, **kwargs) -> UrlMappingModel | None:
            Look up a mapping through the long URL index.

        find_by_shortcode(shortcode: str, **kwargs) -> UrlMappingModel | None:
            Look up a mapping by its short code.

        insert(mapping: UrlMappingModel, **kwargs) -> UrlMappingRedisDAO:
            Insert a mapping inside an optimistic (WATCH/MULTI) transaction.
            Raises MappingAlreadyExistsError when the short code is taken.

        increment_visits(shortcode: str, **kwargs) -> int:
            Increment the visit counter with a server-side script.
            Raises MappingNotFoundError when the short code doesn't exist.

        list_by_owner(owner: str, **kwargs) -> list[UrlMappingModel]:
            Retrieve all mappings of an owner in insertion order.

        All methods raise DataStoreError on connectivity issues with Redis.
    """

    FIELD_LONG_URL = 'long_url'
    FIELD_OWNER = 'owner'
    FIELD_CREATED_AT = 'created_at'
    FIELD_TOTAL_VISITS = 'total_visits'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._increment_visits_script = self.redis.register_script(INCREMENT_VISITS_SCRIPT)

    @handle_redis_error
    @beartype
    def find_by_long_url(self, long_url: str, **kwargs) -> UrlMappingModel | None:
        """Retrieve the mapping registered for a long URL

        Args:
            long_url (str):
                The original URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            UrlMappingModel | None:
                The first mapping created for this long URL, None if there is none.

        Example:
            >>> dao.find_by_long_url('https://example.com')
            UrlMappingModel(long_url='https://example.com', shortcode='k3x9a0qz', ...)
        """
        shortcode = self.redis.get(self.keys.long_url_key(long_url))
        if shortcode is None:
            return None

        mapping = self.find_by_shortcode(shortcode)
        # Guard against a digest collision between two distinct long URLs
        if mapping is None or mapping.long_url != long_url:
            return None
        return mapping

    @handle_redis_error
    @beartype
    def find_by_shortcode(self, shortcode: str, **kwargs) -> UrlMappingModel | None:
        """Retrieve a stored mapping by short code

        Args:
            shortcode (str):
                The short code of the mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            UrlMappingModel | None:
                The mapping if found, otherwise None.

        Example:
            >>> dao.find_by_shortcode('k3x9a0qz').total_visits
            3
        """
        fields = self.redis.hgetall(self.keys.link_key(shortcode))
        if not fields:
            return None
        return self._to_model(shortcode, fields)

    @handle_redis_error
    @beartype
    def insert(self, mapping: UrlMappingModel, **kwargs) -> 'UrlMappingRedisDAO':
        """Insert a URL mapping into Redis

        The mapping key is WATCHed before the existence check. If another client
        creates the same key between the check and EXEC, Redis aborts the
        transaction (WatchError) and nothing is written. The hash, the long URL
        index and the owner list are written in the same MULTI block.

        The long URL index is written with NX, so it keeps pointing at the first
        mapping ever created for a long URL.

        Args:
            mapping (UrlMappingModel):
                UrlMappingModel instance representing the new mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            UrlMappingRedisDAO: self (for method chaining)

        Raises:
            MappingAlreadyExistsError:
                If a mapping with the same short code already exists.
            DataStoreError:
                If a Redis connection issue occurs during the transaction.
        """
        link_key = self.keys.link_key(mapping.shortcode)
        long_url_key = self.keys.long_url_key(mapping.long_url)
        owner_links_key = self.keys.owner_links_key(mapping.owner)
        already_exists = f"Mapping with short code '{mapping.shortcode}' already exists."

        with self.redis.pipeline(transaction=True) as pipe:
            try:
                pipe.watch(link_key)
                if pipe.exists(link_key):
                    raise MappingAlreadyExistsError(already_exists)

                pipe.multi()
                pipe.hset(
                    link_key,
                    mapping={
                        self.FIELD_LONG_URL: mapping.long_url,
                        self.FIELD_OWNER: mapping.owner,
                        self.FIELD_CREATED_AT: mapping.created_at.isoformat(),
                        self.FIELD_TOTAL_VISITS: mapping.total_visits,
                    },
                )
                pipe.set(long_url_key, mapping.shortcode, nx=True)
                pipe.rpush(owner_links_key, mapping.shortcode)
                pipe.execute()
            except redis.exceptions.WatchError as e:
                raise MappingAlreadyExistsError(already_exists) from e
        return self

    @handle_redis_error
    @beartype
    def increment_visits(self, shortcode: str, **kwargs) -> int:
        """Atomically increment the visit counter of a mapping

        The existence check and HINCRBY run inside one Lua script, which Redis
        executes without interleaving other commands.

        Args:
            shortcode (str):
                The short code of the mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            int:
                The visit counter after the increment.

        Raises:
            MappingNotFoundError:
                If no mapping with the given short code exists.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.increment_visits('k3x9a0qz')
            4
        """
        total_visits = self._increment_visits_script(
            keys=[self.keys.link_key(shortcode)],
            args=[self.FIELD_TOTAL_VISITS],
        )
        if total_visits is None:
            raise MappingNotFoundError(f"Mapping with short code '{shortcode}' not found.")
        return int(total_visits)

    @handle_redis_error
    @beartype
    def list_by_owner(self, owner: str, **kwargs) -> list[UrlMappingModel]:
        """Retrieve all mappings created by an owner

        Args:
            owner (str):
                Verified identity of the creator.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            list[UrlMappingModel]:
                The owner's mappings in insertion order.
        """
        shortcodes = self.redis.lrange(self.keys.owner_links_key(owner), 0, -1)
        if not shortcodes:
            return []

        with self.redis.pipeline(transaction=False) as pipe:
            for shortcode in shortcodes:
                pipe.hgetall(self.keys.link_key(shortcode))
            results = pipe.execute()

        return [self._to_model(shortcode, fields) for shortcode, fields in zip(shortcodes, results) if fields]

    def _to_model(self, shortcode: str, fields: dict) -> UrlMappingModel:
        return UrlMappingModel(
            long_url=fields[self.FIELD_LONG_URL],
            shortcode=shortcode,
            owner=fields[self.FIELD_OWNER],
            created_at=datetime.fromisoformat(fields[self.FIELD_CREATED_AT]),
            total_visits=int(fields.get(self.FIELD_TOTAL_VISITS, 0)),
        )
