"""Short code resolution

Classes:
    RedirectResolver:
        Look up the long URL behind a short code and record the visit.

Example:
    >>> resolver = RedirectResolver(dao)
    >>> resolver.resolve('q0v7k2ma')
    'https://example.com/page'
    >>> resolver.resolve('zzzzzzzz') is None
    True
"""

import logging

from shortlinker.dao.base import UrlMappingBaseDAO


logger = logging.getLogger(__name__)


class RedirectResolver:
    """Resolve short codes to long URLs, counting every successful lookup"""

    def __init__(self, dao: UrlMappingBaseDAO):
        self.dao = dao

    def resolve(self, shortcode: str) -> str | None:
        """Return the long URL of `shortcode`, None if it doesn't exist

        The visit is counted as soon as the lookup succeeds, before the caller
        issues the redirect. Unknown short codes leave the store untouched.

        Raises:
            DataStoreError: If the store is unreachable.
        """
        mapping = self.dao.find_by_shortcode(shortcode)
        if mapping is None:
            return None

        total_visits = self.dao.increment_visits(shortcode)
        logger.debug('Visit recorded.', extra={'shortcode': shortcode, 'totalVisits': total_visits})
        return mapping.long_url
