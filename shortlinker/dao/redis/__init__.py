from shortlinker.dao.redis.redis_key_schema import RedisKeySchema
from shortlinker.dao.redis.mixins import RedisClientMixin
from shortlinker.dao.redis.connection import RedisConnectionManager, connections
from shortlinker.dao.redis.url_mapping_redis_dao import UrlMappingRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'RedisConnectionManager',
    'connections',
    'UrlMappingRedisDAO',
]
