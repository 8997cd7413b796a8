"""
Enumeration of geographical location identifiers.
"""

from .field_config import GEOCLASS_NATION
from .logging import get_logger
from .providers.protocol import GeoInfoProvider

logger = get_logger(__name__)


def enumerate_identifiers(provider: GeoInfoProvider, geo_class: int = GEOCLASS_NATION) -> list[int]:
    """
    Collect every identifier of a geo class, in enumeration order.

    Identifier 0 marks the end of enumeration: it stops the OS callback
    loop and is not included. A failed enumeration yields an empty list.

    Args:
        provider: OS geo provider.
        geo_class: Class of identifiers to enumerate.

    Returns:
        Identifiers in the order the OS reported them.
    """
    identifiers: list[int] = []

    def _collect(geo_id: int) -> bool:
        if geo_id == 0:
            return False
        identifiers.append(geo_id)
        return True

    if not provider.enumerate_identifiers(geo_class, 0, _collect):
        logger.warning("geo_enumeration_failed", geo_class=geo_class, collected=len(identifiers))
        return []

    return identifiers
