"""
Shared fixtures: an in-memory provider honoring the OS geo contract.
"""

import pytest

from geoinfo.field_config import GeoType

ENGLISH_US = 0x0409


class FakeGeoProvider:
    """
    In-memory GeoInfoProvider.

    Lengths include the terminator, like the OS. A buffer smaller than
    the value gets nothing written and 0 returned.
    """

    def __init__(self, table, enum_ids=None, enum_result=1, user_locale=ENGLISH_US):
        self.table = table
        self.enum_ids = list(table) if enum_ids is None else list(enum_ids)
        self.enum_result = enum_result
        self.user_locale = user_locale

        self.length_calls = []
        self.field_calls = []
        self.enum_calls = 0
        self.delivered = []

    def _value(self, identifier, geo_type):
        return self.table.get(identifier, {}).get(GeoType(geo_type), "")

    def query_field_length(self, identifier, geo_type, locale_id):
        self.length_calls.append((identifier, GeoType(geo_type), locale_id))
        value = self._value(identifier, geo_type)
        return len(value) + 1 if value else 0

    def query_field(self, identifier, geo_type, buffer, capacity, locale_id):
        self.field_calls.append((identifier, GeoType(geo_type), capacity, locale_id))
        value = self._value(identifier, geo_type)
        if not value or capacity < len(value) + 1:
            return 0
        buffer.value = value
        return len(value) + 1

    def enumerate_identifiers(self, geo_class, parent_id, callback):
        self.enum_calls += 1
        if not self.enum_result:
            return 0
        for geo_id in self.enum_ids:
            self.delivered.append(geo_id)
            if not callback(geo_id):
                break
        return self.enum_result

    def default_locale_id(self):
        return self.user_locale


def nation(geo_id, friendly, official, iso2, iso3, lat, lon, rfc1766, lcid):
    return {
        GeoType.NATION: str(geo_id),
        GeoType.LATITUDE: lat,
        GeoType.LONGITUDE: lon,
        GeoType.ISO2: iso2,
        GeoType.ISO3: iso3,
        GeoType.RFC1766: rfc1766,
        GeoType.LCID: lcid,
        GeoType.FRIENDLYNAME: friendly,
        GeoType.OFFICIALNAME: official,
    }


NATIONS = {
    263: nation(263, "Zambia", "Republic of Zambia", "ZM", "ZMB", "-14.33", "27.83", "en-ZM", "00000000"),
    8: nation(8, "Andorra", "Principality of Andorra", "AD", "AND", "42.55", "1.58", "ca-AD", "00000000"),
    39: nation(39, "Canada", "Canada", "CA", "CAN", "60", "-95", "en-CA", "00001009"),
    217: nation(217, "Spain", "Kingdom of Spain", "ES", "ESP", "40", "-4", "es-ES", "00000c0a"),
    119: nation(119, "Côte d'Ivoire", "Republic of Côte d'Ivoire", "CI", "CIV", "8", "-5", "fr-CI", "00000000"),
}


@pytest.fixture
def provider():
    """Provider with a handful of nations, enumerated in table order."""
    return FakeGeoProvider(NATIONS)
