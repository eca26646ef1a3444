"""Short code allocation

Classes:
    CodeAllocator:
        Return the existing short code of a long URL, or mint and persist a new one.

Example:
    >>> allocator = CodeAllocator(dao)
    >>> allocator.allocate('https://example.com/page', 'a@b.com')
    'q0v7k2ma'
    >>> allocator.allocate('https://example.com/page', 'c@d.com')
    'q0v7k2ma'
"""

import logging
from collections.abc import Callable
from datetime import datetime, UTC

from shortlinker.constants import Shortcode
from shortlinker.models import UrlMappingModel
from shortlinker.dao.base import UrlMappingBaseDAO
from shortlinker.dao.exceptions import MappingAlreadyExistsError
from shortlinker.exceptions import AllocationExhaustedError, InvalidInputError
from shortlinker.utils.shortener import generate_shortcode


logger = logging.getLogger(__name__)


class CodeAllocator:
    """Allocate short codes for long URLs

    Allocation is idempotent per long URL: a long URL that already has a
    mapping gets its existing short code back and nothing is written.

    NOTE:
        The lookup and the insert are two separate store operations. Two
        concurrent first-time allocations of the same long URL can both miss
        the lookup and create two mappings. The long URL index keeps the first
        one, so every later allocation returns the same code.

    Args:
        dao (UrlMappingBaseDAO):
            Mapping store.
        max_attempts (int):
            Number of fresh candidates tried when the store rejects a duplicate
            short code. Defaults to 5.
        shortcode_factory (Callable[[], str]):
            Candidate generator. Defaults to 8 random characters from [a-z0-9].
    """

    def __init__(
        self,
        dao: UrlMappingBaseDAO,
        max_attempts: int = Shortcode.MAX_ALLOCATION_ATTEMPTS,
        shortcode_factory: Callable[[], str] = generate_shortcode,
    ):
        if max_attempts < 1:
            raise ValueError(f'max_attempts must be a positive integer (given value: {max_attempts}).')

        self.dao = dao
        self.max_attempts = max_attempts
        self.shortcode_factory = shortcode_factory

    def allocate(self, long_url: str, owner: str) -> str:
        """Return the short code of `long_url`, allocating one if needed

        Raises:
            InvalidInputError: If `long_url` or `owner` is missing or empty.
            AllocationExhaustedError: If every candidate collided.
            DataStoreError: If the store is unreachable.
        """
        mapping, _ = self.allocate_mapping(long_url, owner)
        return mapping.shortcode

    def allocate_mapping(self, long_url: str, owner: str) -> tuple[UrlMappingModel, bool]:
        """Return the mapping of `long_url` and whether it was just created

        Returns:
            tuple[UrlMappingModel, bool]:
                The mapping, and True if it was inserted by this call.
        """
        if not isinstance(long_url, str) or not long_url:
            raise InvalidInputError('Long URL is required')
        if not isinstance(owner, str) or not owner:
            raise InvalidInputError('Owner is required')

        existing = self.dao.find_by_long_url(long_url)
        if existing is not None:
            logger.debug('Long URL already mapped.', extra={'shortcode': existing.shortcode})
            return existing, False

        created_at = datetime.now(UTC)
        for attempt in range(1, self.max_attempts + 1):
            mapping = UrlMappingModel(
                long_url=long_url,
                shortcode=self.shortcode_factory(),
                owner=owner,
                created_at=created_at,
                total_visits=0,
            )
            try:
                self.dao.insert(mapping)
            except MappingAlreadyExistsError:
                logger.warning(
                    'Short code collision. Retrying with a fresh candidate.',
                    extra={'shortcode': mapping.shortcode, 'attempt': attempt, 'maxAttempts': self.max_attempts},
                )
                continue

            logger.debug('Allocated new short code.', extra={'shortcode': mapping.shortcode, 'attempt': attempt})
            return mapping, True

        raise AllocationExhaustedError(f'Failed to allocate a unique short code after {self.max_attempts} attempts.')
