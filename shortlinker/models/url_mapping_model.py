from dataclasses import dataclass
from datetime import datetime, UTC
from typing import Any


@dataclass(frozen=True)
class UrlMappingModel:
    """Represent a long URL to short code mapping.

    Attributes:
        long_url (str):
            The original URL the short code redirects to. Treated as opaque.
        shortcode (str):
            The unique short identifier of the mapping.
        owner (str):
            Verified identity (email) of the user who created the mapping.
        created_at (datetime):
            Creation time in UTC. Never changes after allocation.
        total_visits (int):
            Number of successful resolutions of the short code.

    Example:
        >>> from datetime import datetime, UTC
        >>> mapping = UrlMappingModel(
        ...     long_url="https://example.com/article/123",
        ...     shortcode="k3x9a0qz",
        ...     owner="a@b.com",
        ...     created_at=datetime(2025, 10, 15, tzinfo=UTC),
        ... )
        >>> mapping.total_visits
        0
        >>> mapping.to_dict()['createdAt']
        '2025-10-15T00:00:00Z'
    """

    long_url: str
    shortcode: str
    owner: str
    created_at: datetime
    total_visits: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Render the mapping as a JSON-serializable dictionary"""
        # fmt: off
        created_at = self.created_at.astimezone(UTC) \
                                    .isoformat(timespec='seconds') \
                                    .replace('+00:00', 'Z')
        # fmt: on
        return {
            'longUrl': self.long_url,
            'shortCode': self.shortcode,
            'owner': self.owner,
            'createdAt': created_at,
            'totalVisits': self.total_visits,
        }
