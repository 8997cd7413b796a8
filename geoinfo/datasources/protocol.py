"""
Protocol definition for geographic data sources.

Any class implementing this Protocol can be used as a datasource,
without needing to inherit from a base class (structural typing).
"""

from typing import Any, Protocol


class GeoDataSource(Protocol):
    """
    Protocol for geographic data sources.

    Implementations resolve location names to geographic features.
    Features are returned as standard GeoJSON Feature objects (dicts) in WGS84 (EPSG:4326).

    Example of returned feature:
        {
            "type": "Feature",
            "id": "217",
            "geometry": {"type": "Point", "coordinates": [-4.0, 40.0]},
            "bbox": [-4.0, 40.0, -4.0, 40.0],
            "properties": {
                "friendly_name": "Spain",
                "iso2": "ES",
                "type": "country",
                ...
            }
        }
    """

    def search(
        self,
        name: str,
        type: str | None = None,
        max_results: int = 10,
    ) -> list[dict[str, Any]]:
        """
        Search for geographic features by name.

        Args:
            name: Location name to search for (e.g., "Spain", "Deutschland").
            type: Optional type hint for filtering results (e.g., "country").
            max_results: Maximum number of results to return.

        Returns:
            List of matching GeoJSON Feature dicts, ranked by relevance.
            Returns empty list if no matches found.
        """
        ...

    def get_by_id(self, feature_id: str) -> dict[str, Any] | None:
        """
        Get a specific feature by its unique identifier.

        Args:
            feature_id: Unique identifier from the data source.

        Returns:
            The matching GeoJSON Feature dict, or None if not found.
        """
        ...

    def get_available_types(self) -> list[str]:
        """
        Get list of concrete geographic types this datasource can return.

        Returns:
            List of concrete type strings (e.g., ["country"]).
            Empty list if this datasource does not provide type information.
        """
        ...
