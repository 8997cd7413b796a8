"""
Windows National Language Support geo provider.

Binds GetGeoInfoW, EnumSystemGeoID and GetUserDefaultLCID from kernel32
with ctypes.
"""

import ctypes
import sys
from typing import Any

from ..exceptions import ProviderUnavailableError
from ..field_config import GeoType
from .protocol import EnumGeoCallback


class WindowsGeoProvider:
    """
    GeoInfoProvider backed by kernel32.

    Raises ProviderUnavailableError when constructed on a host without
    the Windows geo API.

    Examples:
        >>> provider = WindowsGeoProvider()
        >>> lcid = provider.default_locale_id()
        >>> size = provider.query_field_length(244, GeoType.FRIENDLYNAME, lcid)
    """

    def __init__(self):
        if sys.platform != "win32":
            raise ProviderUnavailableError(
                f"Windows geo API is not available on platform '{sys.platform}'",
                platform=sys.platform,
            )

        from ctypes import wintypes

        try:
            kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
        except OSError as e:
            raise ProviderUnavailableError(
                f"Failed to load kernel32: {e}", platform=sys.platform, original_error=e
            ) from e

        # BOOL CALLBACK EnumGeoInfoProc(GEOID GeoId)
        self._enum_proc_type = ctypes.WINFUNCTYPE(wintypes.BOOL, wintypes.LONG)

        self._get_geo_info = kernel32.GetGeoInfoW
        self._get_geo_info.argtypes = [
            wintypes.LONG,  # GEOID Location
            wintypes.DWORD,  # GEOTYPE GeoType
            wintypes.LPWSTR,  # lpGeoData
            ctypes.c_int,  # cchData
            wintypes.WORD,  # LANGID LangId
        ]
        self._get_geo_info.restype = ctypes.c_int

        self._enum_system_geo_id = kernel32.EnumSystemGeoID
        self._enum_system_geo_id.argtypes = [wintypes.DWORD, wintypes.LONG, self._enum_proc_type]
        self._enum_system_geo_id.restype = wintypes.BOOL

        self._get_user_default_lcid = kernel32.GetUserDefaultLCID
        self._get_user_default_lcid.argtypes = []
        self._get_user_default_lcid.restype = wintypes.DWORD

    def query_field_length(self, identifier: int, geo_type: GeoType, locale_id: int) -> int:
        return self._get_geo_info(identifier, int(geo_type), None, 0, locale_id & 0xFFFF)

    def query_field(self, identifier: int, geo_type: GeoType, buffer: Any, capacity: int, locale_id: int) -> int:
        return self._get_geo_info(identifier, int(geo_type), buffer, capacity, locale_id & 0xFFFF)

    def enumerate_identifiers(self, geo_class: int, parent_id: int, callback: EnumGeoCallback) -> int:
        # The ctypes thunk must stay referenced for the whole call
        proc = self._enum_proc_type(lambda geo_id: bool(callback(geo_id)))
        return self._enum_system_geo_id(geo_class, parent_id, proc)

    def default_locale_id(self) -> int:
        return self._get_user_default_lcid()
