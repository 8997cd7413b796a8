"""
Sorted, read-only views of cached locations for display.
"""

import locale
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .cache import LocationCache
from .models import LocationRecord


def use_system_collation() -> str:
    """
    Adopt the user's locale for string collation (LC_COLLATE).

    Python starts in the "C" locale, where locale.strxfrm is plain
    code-point order. Call this once at startup, before sorting, so the
    default sort key follows the OS locale.

    Returns:
        Name of the collation locale now in effect.

    Raises:
        locale.Error: If the user's locale is not available on this host.
    """
    return locale.setlocale(locale.LC_COLLATE, "")


def sort_locations(
    records: Iterable[LocationRecord],
    collate: Callable[[str], Any] | None = None,
) -> list[LocationRecord]:
    """
    Sort locations by friendly name.

    The sort is stable, so records with equal names keep their enumeration order.

    Args:
        records: Records to sort.
        collate: Sort key applied to friendly names. Defaults to
            locale.strxfrm, the LC_COLLATE of the process; call
            use_system_collation() first to make that the OS locale.

    Returns:
        New list of the same record objects in ascending order.
    """
    key = collate or locale.strxfrm
    return sorted(records, key=lambda record: key(record.friendly_name))


class LocationListView:
    """
    Friendly-name sorted list of the locations in a cache.

    The view never mutates records. refresh() re-derives the order from
    the cache, which costs no OS calls once the cache is populated.

    Without a collate key the order follows LC_COLLATE; applications call
    use_system_collation() at startup to sort in the OS locale.
    """

    def __init__(self, cache: LocationCache, collate: Callable[[str], Any] | None = None):
        self.cache = cache
        self.collate = collate
        self._locations: tuple[LocationRecord, ...] = ()
        self.refresh()

    def refresh(self) -> tuple[LocationRecord, ...]:
        self._locations = tuple(sort_locations(self.cache.get_locations(), collate=self.collate))
        return self._locations

    @property
    def locations(self) -> tuple[LocationRecord, ...]:
        return self._locations

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self) -> Iterator[LocationRecord]:
        return iter(self._locations)

    def find_by_iso(self, code: str) -> LocationRecord | None:
        """
        Find a location by its ISO 2- or 3-letter code (case-insensitive).

        Returns:
            The matching record, or None if no location has that code.
        """
        wanted = code.strip().upper()
        if not wanted:
            return None
        for record in self._locations:
            if wanted in (record.iso2.upper(), record.iso3.upper()):
                return record
        return None
