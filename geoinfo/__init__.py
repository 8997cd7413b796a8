"""
GeoInfo - Geographical locations known to the operating system

Enumerate nations, fetch their codes, coordinates and names, and cache them for display.
"""

# Main API
from .cache import LocationCache

# Datasources
from .datasources import GeoDataSource, SystemGeoSource
from .enumerator import enumerate_identifiers

# Exceptions
from .exceptions import GeoInfoError, ProviderUnavailableError, UnknownFieldError
from .fetcher import fetch_field

# Configuration
from .field_config import GEOCLASS_NATION, FieldConfig, GeoFieldConfig, GeoType

# Models
from .models import LocationRecord

# Presentation
from .presentation import LocationListView, sort_locations, use_system_collation

# Providers
from .providers import GeoInfoProvider, WindowsGeoProvider
from .settings import Settings, get_settings

# Spatial
from .spatial import record_to_feature, records_to_feature_collection

__all__ = [
    # Main API
    "LocationCache",
    "fetch_field",
    "enumerate_identifiers",
    # Models
    "LocationRecord",
    # Configuration
    "GeoType",
    "GEOCLASS_NATION",
    "FieldConfig",
    "GeoFieldConfig",
    "Settings",
    "get_settings",
    # Exceptions
    "GeoInfoError",
    "ProviderUnavailableError",
    "UnknownFieldError",
    # Providers
    "GeoInfoProvider",
    "WindowsGeoProvider",
    # Presentation
    "LocationListView",
    "sort_locations",
    "use_system_collation",
    # Datasources
    "GeoDataSource",
    "SystemGeoSource",
    # Spatial
    "record_to_feature",
    "records_to_feature_collection",
]
