"""
Pydantic model for geographical locations returned by the OS.
"""

from pydantic import BaseModel, ConfigDict, Field


class LocationRecord(BaseModel):
    """
    One geographical location with every field the OS reports for it.

    Each value is the verbatim string returned by the OS for the field,
    or an empty string when the OS has no data for it.
    """

    model_config = ConfigDict(frozen=True)

    nation: str = Field(default="", description="Geographical location identifier of the nation")
    latitude: str = Field(default="", description="Latitude of the location")
    longitude: str = Field(default="", description="Longitude of the location")
    iso2: str = Field(default="", description="ISO 2-letter country/region code")
    iso3: str = Field(default="", description="ISO 3-letter country/region code")
    rfc1766: str = Field(default="", description="Language tag derived from the location")
    lcid: str = Field(default="", description="Locale identifier derived from the location")
    friendly_name: str = Field(default="", description="Friendly name, for example Germany")
    official_name: str = Field(default="", description="Official name, for example Federal Republic of Germany")
    time_zones: str = Field(default="", description="Time zones (not provided by the OS)")
    official_languages: str = Field(default="", description="Official languages (not provided by the OS)")

    def field_values(self) -> tuple[str, ...]:
        """Return all field values in fetch order."""
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def coordinates(self) -> tuple[float, float] | None:
        """
        Parse the location coordinates.

        Returns:
            (longitude, latitude) as floats, or None if either value is
            missing or not a number.
        """
        try:
            return float(self.longitude), float(self.latitude)
        except ValueError:
            return None
