import threading

import pytest

from shortlinker.models import UrlMappingModel
from shortlinker.dao.base import UrlMappingBaseDAO
from shortlinker.dao.exceptions import MappingAlreadyExistsError, MappingNotFoundError


class InMemoryUrlMappingDAO(UrlMappingBaseDAO):
    """Thread-safe UrlMappingBaseDAO backed by dictionaries.

    Mirrors the Redis layout: mappings by short code, a first-writer-wins
    long URL index and insertion-ordered owner lists.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.links: dict[str, dict] = {}
        self.urls: dict[str, str] = {}
        self.owners: dict[str, list[str]] = {}
        self.writes = 0

    def find_by_long_url(self, long_url, **kwargs):
        with self._lock:
            shortcode = self.urls.get(long_url)
        return None if shortcode is None else self.find_by_shortcode(shortcode)

    def find_by_shortcode(self, shortcode, **kwargs):
        with self._lock:
            fields = self.links.get(shortcode)
            return None if fields is None else UrlMappingModel(shortcode=shortcode, **fields)

    def insert(self, mapping, **kwargs):
        with self._lock:
            if mapping.shortcode in self.links:
                raise MappingAlreadyExistsError(f"Mapping with short code '{mapping.shortcode}' already exists.")
            self.links[mapping.shortcode] = {
                'long_url': mapping.long_url,
                'owner': mapping.owner,
                'created_at': mapping.created_at,
                'total_visits': mapping.total_visits,
            }
            self.urls.setdefault(mapping.long_url, mapping.shortcode)
            self.owners.setdefault(mapping.owner, []).append(mapping.shortcode)
            self.writes += 1
        return self

    def increment_visits(self, shortcode, **kwargs):
        with self._lock:
            if shortcode not in self.links:
                raise MappingNotFoundError(f"Mapping with short code '{shortcode}' not found.")
            self.links[shortcode]['total_visits'] += 1
            self.writes += 1
            return self.links[shortcode]['total_visits']

    def list_by_owner(self, owner, **kwargs):
        with self._lock:
            shortcodes = list(self.owners.get(owner, []))
        return [self.find_by_shortcode(shortcode) for shortcode in shortcodes]


@pytest.fixture
def dao() -> InMemoryUrlMappingDAO:
    return InMemoryUrlMappingDAO()
