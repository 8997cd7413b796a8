"""
Geo field types and the registry of fields fetched for every location.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

from .exceptions import UnknownFieldError

# Geo class of nations, the only class enumerated
GEOCLASS_NATION = 0x10


class GeoType(IntEnum):
    """Kinds of information the OS returns for a geographical location."""

    NATION = 0x0001
    LATITUDE = 0x0002
    LONGITUDE = 0x0003
    ISO2 = 0x0004
    ISO3 = 0x0005
    RFC1766 = 0x0006
    LCID = 0x0007
    FRIENDLYNAME = 0x0008
    OFFICIALNAME = 0x0009
    TIMEZONES = 0x000A
    OFFICIALLANGUAGES = 0x000B


@dataclass(frozen=True)
class FieldConfig:
    """
    Configuration for a single location field.

    Attributes:
        name: Attribute name on LocationRecord (e.g., "iso2", "friendly_name")
        geo_type: OS field type requested for this attribute
        description: Human-readable description
        reserved: The OS declares this type but returns no data for it
    """

    name: str
    geo_type: GeoType
    description: str
    reserved: bool = False


class GeoFieldConfig:
    """
    Registry of location fields in fetch order.

    The order of registration is the order in which fields are fetched
    for each identifier.
    """

    def __init__(self):
        """Initialize with the built-in location fields."""
        self.fields: dict[str, FieldConfig] = {}
        self._initialize_defaults()

    def _initialize_defaults(self):
        """Register the built-in fields in fetch order."""
        for config in (
            FieldConfig("nation", GeoType.NATION, "Geographical location identifier of the nation"),
            FieldConfig("latitude", GeoType.LATITUDE, "Latitude of the location"),
            FieldConfig("longitude", GeoType.LONGITUDE, "Longitude of the location"),
            FieldConfig("iso2", GeoType.ISO2, "ISO 2-letter country/region code"),
            FieldConfig("iso3", GeoType.ISO3, "ISO 3-letter country/region code"),
            FieldConfig("rfc1766", GeoType.RFC1766, "Language tag derived from the location and language"),
            FieldConfig("lcid", GeoType.LCID, "Locale identifier derived from the location"),
            FieldConfig("friendly_name", GeoType.FRIENDLYNAME, "Friendly name, for example Germany"),
            FieldConfig(
                "official_name", GeoType.OFFICIALNAME, "Official name, for example Federal Republic of Germany"
            ),
            FieldConfig("time_zones", GeoType.TIMEZONES, "Time zones of the location", reserved=True),
            FieldConfig(
                "official_languages", GeoType.OFFICIALLANGUAGES, "Official languages of the location", reserved=True
            ),
        ):
            self.fields[config.name] = config

    def has_field(self, name: str) -> bool:
        """
        Check if a field is registered.

        Args:
            name: Field name to check

        Returns:
            True if field exists, False otherwise
        """
        return name in self.fields

    def get_config(self, name: str) -> FieldConfig:
        """
        Get configuration for a field.

        Args:
            name: Field name

        Returns:
            FieldConfig for the specified field

        Raises:
            UnknownFieldError: If field is not registered
        """
        if not self.has_field(name):
            raise UnknownFieldError(
                f"Unknown location field: '{name}'. Available fields: {', '.join(self.fields)}",
                field_name=name,
            )
        return self.fields[name]

    def get_by_geo_type(self, geo_type: GeoType | int) -> FieldConfig:
        """Get the field fetched with the given geo type."""
        for config in self.fields.values():
            if config.geo_type == geo_type:
                return config
        raise UnknownFieldError(f"No location field for geo type {int(geo_type)}", field_name=str(int(geo_type)))

    def iter_fields(self) -> Iterator[FieldConfig]:
        """Iterate over field configurations in fetch order."""
        return iter(self.fields.values())

    def list_fields(self, include_reserved: bool = True) -> list[str]:
        """
        List field names in fetch order.

        Args:
            include_reserved: Whether to include fields the OS never fills

        Returns:
            List of field names
        """
        return [c.name for c in self.fields.values() if include_reserved or not c.reserved]

    def format_for_display(self) -> str:
        """
        Format the registered fields as a readable table.

        Returns:
            One line per field with its geo type value and description
        """
        width = max(len(name) for name in self.fields)
        lines = []
        for config in self.fields.values():
            flag = " [reserved]" if config.reserved else ""
            lines.append(f"  {config.name:<{width}}  {int(config.geo_type):>2}  {config.description}{flag}")
        return "\n".join(lines)
