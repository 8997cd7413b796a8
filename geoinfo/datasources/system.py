"""
Data source over the nations known to the operating system.
"""

import unicodedata
from typing import Any

from ..cache import LocationCache
from ..models import LocationRecord
from ..spatial import record_to_feature

# Type hints this source answers to
_COUNTRY_TYPES = {"country", "administrative"}


def _normalize_name(name: str) -> str:
    """Lowercase and strip accents (Côte d'Ivoire -> cote d'ivoire)."""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold().strip()


class SystemGeoSource:
    """
    GeoDataSource backed by a LocationCache.

    Every feature is a country with a point geometry at the coordinates
    the OS reports for it.

    Examples:
        >>> source = SystemGeoSource(LocationCache.from_settings())
        >>> source.search("spain")[0]["properties"]["iso3"]
        'ESP'
    """

    def __init__(self, cache: LocationCache):
        self.cache = cache

    def search(
        self,
        name: str,
        type: str | None = None,
        max_results: int = 10,
    ) -> list[dict[str, Any]]:
        if type is not None and type.lower().strip() not in _COUNTRY_TYPES:
            return []

        wanted = _normalize_name(name)
        if not wanted or max_results <= 0:
            return []

        # (rank, enumeration index, record); lower rank is a better match
        matches: list[tuple[int, int, LocationRecord]] = []
        for index, record in enumerate(self.cache.get_locations()):
            rank = self._match_rank(wanted, record)
            if rank is not None:
                matches.append((rank, index, record))

        matches.sort(key=lambda m: (m[0], m[1]))
        return [self._to_feature(record, rank) for rank, _, record in matches[:max_results]]

    def get_by_id(self, feature_id: str) -> dict[str, Any] | None:
        wanted = feature_id.strip().upper()
        if not wanted:
            return None
        for record in self.cache.get_locations():
            # Empty codes are "no data" and never match
            codes = {code.upper() for code in (record.nation, record.iso2, record.iso3) if code}
            if wanted in codes:
                return record_to_feature(record)
        return None

    def get_available_types(self) -> list[str]:
        return ["country"]

    @staticmethod
    def _match_rank(wanted: str, record: LocationRecord) -> int | None:
        names = [_normalize_name(n) for n in (record.friendly_name, record.official_name) if n]
        if any(n == wanted for n in names):
            return 0
        if any(n.startswith(wanted) for n in names):
            return 1
        if any(wanted in n for n in names):
            return 2
        return None

    @staticmethod
    def _to_feature(record: LocationRecord, rank: int) -> dict[str, Any]:
        feature = record_to_feature(record)
        feature["properties"]["confidence"] = (1.0, 0.8, 0.5)[rank]
        return feature
