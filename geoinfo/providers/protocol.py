"""
Protocol definition for operating system geo providers.

Any class implementing this Protocol can be used as a provider,
without needing to inherit from a base class (structural typing).
"""

from collections.abc import Callable
from typing import Any, Protocol

from ..field_config import GeoType

# Callback receiving one identifier; returns True to continue enumeration
EnumGeoCallback = Callable[[int], bool]


class GeoInfoProvider(Protocol):
    """
    Protocol for the primitive geo operations of the host OS.

    Return values follow the OS conventions: lengths and counts are in
    native characters, and zero means no data or failure.
    """

    def query_field_length(self, identifier: int, geo_type: GeoType, locale_id: int) -> int:
        """
        Get the buffer size required for one field.

        Args:
            identifier: Geographical location identifier.
            geo_type: Field type to query.
            locale_id: Locale used for human-readable fields.

        Returns:
            Required size in characters, including the terminator.
            Zero or negative when the field has no data.
        """
        ...

    def query_field(self, identifier: int, geo_type: GeoType, buffer: Any, capacity: int, locale_id: int) -> int:
        """
        Write one field into a caller-allocated buffer.

        Args:
            identifier: Geographical location identifier.
            geo_type: Field type to query.
            buffer: ctypes wide-character array of at least ``capacity`` units.
            capacity: Size of the buffer in characters.
            locale_id: Locale used for human-readable fields.

        Returns:
            Number of characters written, zero or negative on failure.
        """
        ...

    def enumerate_identifiers(self, geo_class: int, parent_id: int, callback: EnumGeoCallback) -> int:
        """
        Enumerate identifiers of a geo class.

        Args:
            geo_class: Class of identifiers to enumerate (e.g., GEOCLASS_NATION).
            parent_id: Reserved, always 0.
            callback: Called once per identifier; enumeration stops when it returns False.

        Returns:
            Nonzero on success, zero on failure.
        """
        ...

    def default_locale_id(self) -> int:
        """Return the locale identifier of the current user."""
        ...
