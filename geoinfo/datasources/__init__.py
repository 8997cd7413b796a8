"""
Geographic data source layer for resolving location names to geometries.

Provides a Protocol-based interface for data sources and an implementation over the OS nations.
"""

from .protocol import GeoDataSource
from .system import SystemGeoSource

__all__ = [
    "GeoDataSource",
    "SystemGeoSource",
]
