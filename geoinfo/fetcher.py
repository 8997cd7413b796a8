"""
Two-phase retrieval of a single location field.
"""

import ctypes

from .field_config import GeoType
from .logging import get_logger
from .providers.protocol import GeoInfoProvider

logger = get_logger(__name__)


def fetch_field(provider: GeoInfoProvider, identifier: int, geo_type: GeoType, locale_id: int) -> str:
    """
    Fetch one field of one location from the OS.

    The OS is queried twice: first with a zero-capacity buffer to learn the
    required size, then with a buffer of exactly that size. A field the OS
    has no data for is returned as an empty string; it is never an error.
    The same holds when the OS call fails or the reported size cannot be
    allocated.

    Args:
        provider: OS geo provider.
        identifier: Geographical location identifier.
        geo_type: Field type to fetch.
        locale_id: Locale used for human-readable fields.

    Returns:
        The field value up to its terminator, or "" when there is no data.

    Examples:
        >>> fetch_field(provider, 217, GeoType.FRIENDLYNAME, 0x0409)
        'Spain'
        >>> fetch_field(provider, 217, GeoType.TIMEZONES, 0x0409)
        ''
    """
    try:
        required = provider.query_field_length(identifier, geo_type, locale_id)
        if required <= 0:
            return ""

        buffer = ctypes.create_unicode_buffer(required)
        written = provider.query_field(identifier, geo_type, buffer, required, locale_id)
    except (OSError, MemoryError, OverflowError) as e:
        # Failed call or unallocatable size: no data for this field
        logger.warning("geo_field_query_failed", geo_id=identifier, geo_type=int(geo_type), error=str(e))
        return ""

    if written <= 0:
        return ""

    # .value stops at the first terminator
    return buffer.value
