"""
Memoized collection of the geographical locations known to the OS.
"""

import threading

from .enumerator import enumerate_identifiers
from .fetcher import fetch_field
from .field_config import GEOCLASS_NATION, GeoFieldConfig
from .logging import get_logger
from .models import LocationRecord
from .providers.protocol import GeoInfoProvider
from .settings import Settings, get_settings

logger = get_logger(__name__)


class LocationCache:
    """
    Main entry point for reading the nations known to the OS.

    The first call to get_locations() enumerates every nation identifier
    and fetches each of its fields. The resulting records are kept for
    the lifetime of the cache and returned on every later call without
    querying the OS again.

    Examples:
        >>> cache = LocationCache.from_settings()
        >>> locations = cache.get_locations()
        >>> locations[0].friendly_name
        'Antigua and Barbuda'
        >>> cache.get_locations() is locations
        True
    """

    def __init__(
        self,
        provider: GeoInfoProvider,
        locale_id: int,
        field_config: GeoFieldConfig | None = None,
    ):
        """
        Initialize the cache.

        Args:
            provider: OS geo provider
            locale_id: Locale used for every human-readable field; fixed for the
                lifetime of the cache
            field_config: Field registry. If None, uses the built-in fields
        """
        self.provider = provider
        self.field_config = field_config or GeoFieldConfig()
        self._locale_id = locale_id

        self._lock = threading.Lock()
        self._populated = False
        self._identifiers: tuple[int, ...] = ()
        self._locations: tuple[LocationRecord, ...] = ()

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        provider: GeoInfoProvider | None = None,
    ) -> "LocationCache":
        """
        Build a cache from configuration.

        The locale comes from settings.locale_id, or from the OS user
        default when it is not configured.

        Raises:
            ProviderUnavailableError: If no provider is given and the Windows
                geo API is not available
        """
        resolved_settings = settings or get_settings()
        if provider is None:
            from .providers.windows import WindowsGeoProvider

            provider = WindowsGeoProvider()

        locale_id = resolved_settings.locale_id
        if locale_id is None:
            locale_id = provider.default_locale_id()

        return cls(provider=provider, locale_id=locale_id)

    @property
    def locale_id(self) -> int:
        return self._locale_id

    @property
    def populated(self) -> bool:
        """True once the OS has been queried, even if it reported no locations."""
        return self._populated

    def get_locations(self) -> tuple[LocationRecord, ...]:
        """
        Get every nation location, in enumeration order.

        Returns:
            The cached records. The same tuple is returned on every call.
        """
        self._ensure_populated()
        return self._locations

    def get_identifiers(self) -> tuple[int, ...]:
        """Get the nation identifiers captured by the single enumeration pass."""
        self._ensure_populated()
        return self._identifiers

    def _ensure_populated(self) -> None:
        if self._populated:
            return
        with self._lock:
            if self._populated:
                return
            self._populate()

    def _populate(self) -> None:
        logger.debug("geo_cache_populate_start", locale_id=self._locale_id)

        identifiers = enumerate_identifiers(self.provider, GEOCLASS_NATION)
        locations = [self._build_record(geo_id) for geo_id in identifiers]

        self._identifiers = tuple(identifiers)
        self._locations = tuple(locations)
        self._populated = True

        logger.info("geo_cache_populated", locale_id=self._locale_id, locations=len(self._locations))

    def _build_record(self, identifier: int) -> LocationRecord:
        values = {
            config.name: fetch_field(self.provider, identifier, config.geo_type, self._locale_id)
            for config in self.field_config.iter_fields()
        }
        return LocationRecord(**values)
