"""
Tests for SystemGeoSource.
"""

import pytest
from conftest import ENGLISH_US, NATIONS, FakeGeoProvider

from geoinfo.cache import LocationCache
from geoinfo.datasources import SystemGeoSource
from geoinfo.field_config import GeoType


@pytest.fixture
def source(provider):
    """Create a SystemGeoSource over the fake provider."""
    return SystemGeoSource(LocationCache(provider, ENGLISH_US))


def test_search_exact(source):
    """Test exact name matching."""
    results = source.search("Canada")
    assert len(results) == 1
    assert results[0]["properties"]["iso3"] == "CAN"
    assert results[0]["properties"]["confidence"] == 1.0


def test_search_official_name(source):
    """Test official names are searched too."""
    results = source.search("Kingdom of Spain")
    assert [r["properties"]["iso2"] for r in results] == ["ES"]


def test_search_case_insensitive(source):
    """Test case-insensitive matching."""
    assert len(source.search("zambia")) == 1


def test_search_accent_normalization(source):
    """Test accent stripping (Côte d'Ivoire -> Cote d'Ivoire)."""
    results = source.search("Cote d'Ivoire")
    assert len(results) == 1
    assert results[0]["properties"]["friendly_name"] == "Côte d'Ivoire"


def test_search_ranking(source):
    """Test exact matches rank before substring matches."""
    # "Canada" is exact; "Principality of Andorra" and others contain "an"
    results = source.search("an")
    assert len(results) > 1
    assert all(r["properties"]["confidence"] <= 0.8 for r in results)

    results = source.search("canada")
    assert results[0]["properties"]["confidence"] == 1.0


def test_search_max_results(source):
    """Test result count is capped."""
    assert len(source.search("a", max_results=2)) == 2


def test_search_type_filter(source):
    """Test only country-like type hints match."""
    assert len(source.search("Canada", type="country")) == 1
    assert len(source.search("Canada", type="administrative")) == 1
    assert source.search("Canada", type="lake") == []


def test_unknown_name(source):
    """Test searching for non-existent name."""
    assert source.search("Atlantis") == []
    assert source.search("   ") == []


def test_get_by_id(source):
    """Test retrieving feature by nation id or ISO code."""
    assert source.get_by_id("217")["properties"]["friendly_name"] == "Spain"
    assert source.get_by_id("zm")["properties"]["friendly_name"] == "Zambia"
    assert source.get_by_id("AND")["properties"]["friendly_name"] == "Andorra"
    assert source.get_by_id("nope") is None


def test_available_types(source):
    assert source.get_available_types() == ["country"]


def test_get_by_id_blank_never_matches_empty_codes():
    """Test a blank id does not match a record whose ISO codes are empty."""
    provider = FakeGeoProvider({1: {GeoType.NATION: "1", GeoType.FRIENDLYNAME: "Nowhere"}, **NATIONS})
    source = SystemGeoSource(LocationCache(provider, ENGLISH_US))

    assert source.get_by_id("") is None
    assert source.get_by_id("   ") is None
    assert source.get_by_id("1")["properties"]["friendly_name"] == "Nowhere"


@pytest.mark.parametrize("max_results", [0, -1, -5])
def test_search_non_positive_max_results(source, max_results):
    """Test a zero or negative cap returns no results."""
    assert source.search("a", max_results=max_results) == []
