"""
Operating system geo providers.

Provides a Protocol-based interface for the OS geo primitives and a Windows implementation.
"""

from .protocol import EnumGeoCallback, GeoInfoProvider
from .windows import WindowsGeoProvider

__all__ = [
    "EnumGeoCallback",
    "GeoInfoProvider",
    "WindowsGeoProvider",
]
