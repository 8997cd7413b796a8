"""
GeoJSON export of location records.

All outputs are GeoJSON dicts in WGS84 (EPSG:4326).
Shapely is used internally to build geometries.
"""

from collections.abc import Iterable
from typing import Any

from shapely.geometry import Point, mapping

from .models import LocationRecord


def record_to_feature(record: LocationRecord) -> dict[str, Any]:
    """
    Convert a location record to a GeoJSON Feature.

    The geometry is the point at the record's coordinates, or None when
    the OS reported no usable latitude/longitude.

    Args:
        record: Location record.

    Returns:
        GeoJSON Feature dict. Properties carry every record field verbatim.

    Examples:
        >>> feature = record_to_feature(LocationRecord(nation="217", latitude="40", longitude="-4"))
        >>> feature["geometry"]
        {'type': 'Point', 'coordinates': (-4.0, 40.0)}
    """
    feature: dict[str, Any] = {
        "type": "Feature",
        "id": record.nation,
        "geometry": None,
        "properties": {**record.model_dump(), "type": "country"},
    }

    coords = record.coordinates()
    if coords is not None:
        point = Point(*coords)
        feature["geometry"] = mapping(point)
        feature["bbox"] = list(point.bounds)

    return feature


def records_to_feature_collection(records: Iterable[LocationRecord]) -> dict[str, Any]:
    """Convert location records to a GeoJSON FeatureCollection."""
    return {
        "type": "FeatureCollection",
        "features": [record_to_feature(record) for record in records],
    }
