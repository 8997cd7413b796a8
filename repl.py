"""
Interactive REPL for browsing the locations known to the OS.
"""

import locale

from geoinfo import (
    LocationListView,
    LocationRecord,
    ProviderUnavailableError,
    SystemGeoSource,
    use_system_collation,
)
from geoinfo.cache import LocationCache
from geoinfo.logging import configure_logging


def print_location(record):
    """Pretty print one location record."""
    print()
    print("=" * 60)
    print(record.friendly_name or "(no name)")
    print("=" * 60)

    print(f"\n🏳️  Official name: {record.official_name or '(not specified)'}")
    print(f"   ISO codes: {record.iso2 or '-'} / {record.iso3 or '-'}")
    print(f"   Nation id: {record.nation}")

    if record.coordinates() is not None:
        print(f"\n📍 Latitude: {record.latitude}")
        print(f"   Longitude: {record.longitude}")
    else:
        print("\n📍 Coordinates: (not available)")

    print(f"\n🗣️  Language tag: {record.rfc1766 or '-'}")
    print(f"   Locale id: {record.lcid or '-'}")

    print()


def main():
    """Run the interactive REPL."""
    configure_logging("WARNING")

    # Sort names the way the OS locale does
    try:
        use_system_collation()
    except locale.Error as e:
        print(f"⚠️  Using default string order: {e}")

    print("🔄 Loading locations...")
    try:
        cache = LocationCache.from_settings()
    except ProviderUnavailableError as e:
        print(f"❌ Error: {e}")
        return

    view = LocationListView(cache)
    source = SystemGeoSource(cache)

    print(f"✅ {len(view)} locations loaded (locale id {cache.locale_id:#06x})")
    print()
    print("=" * 60)
    print("GeoInfo Interactive REPL")
    print("=" * 60)
    print("Enter an ISO code or a country name.")
    print("Type 'help' for available commands or 'quit' to exit.")
    print()

    while True:
        try:
            query = input("🔍 Location: ").strip()

            if not query:
                continue

            if query.lower() == "quit" or query.lower() == "exit":
                print("👋 Goodbye!")
                break

            if query.lower() == "help":
                print()
                print("Available commands:")
                print("  help    - Show this help message")
                print("  quit    - Exit the REPL")
                print("  fields  - List the fields fetched for each location")
                print("  list    - List all locations by friendly name")
                print("  count   - Show the number of locations")
                print()
                print("Example lookups:")
                print("  - 'CH'")
                print("  - 'DEU'")
                print("  - 'Canada'")
                print()
                continue

            if query.lower() == "fields":
                print()
                print(cache.field_config.format_for_display())
                print()
                continue

            if query.lower() == "list":
                print()
                for record in view:
                    print(f"  {record.iso2:<3} {record.friendly_name}")
                print()
                continue

            if query.lower() == "count":
                print(f"\n{len(view)} locations\n")
                continue

            record = view.find_by_iso(query) if len(query) <= 3 else None
            if record is not None:
                print_location(record)
                continue

            results = source.search(query, max_results=5)
            if not results:
                print(f"\n🤷 No location matches '{query}'\n")
                continue

            for feature in results:
                properties = feature["properties"]
                print_location(LocationRecord(**{name: properties[name] for name in LocationRecord.model_fields}))

        except KeyboardInterrupt:
            print("\n👋 Interrupted. Goodbye!")
            break
        except Exception as e:
            print(f"\n❌ Error: {e}")
            print()


if __name__ == "__main__":
    main()
