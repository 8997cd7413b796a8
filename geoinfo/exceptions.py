"""
Custom exceptions for GeoInfo providers and lookups.
"""


class GeoInfoError(Exception):
    """Base exception for all GeoInfo errors."""

    pass


class ProviderUnavailableError(GeoInfoError):
    """The operating system geo API cannot be used on this host."""

    def __init__(self, message: str, platform: str = "", original_error: Exception | None = None):
        """
        Initialize provider error.

        Args:
            message: Error description
            platform: Platform identifier of the host (e.g. sys.platform)
            original_error: Original exception raised while loading the API
        """
        self.platform = platform
        self.original_error = original_error
        super().__init__(message)


class UnknownFieldError(GeoInfoError):
    """Field name is not registered in the field configuration."""

    def __init__(self, message: str, field_name: str):
        """
        Initialize unknown field error.

        Args:
            message: Error description
            field_name: The unknown field name
        """
        self.field_name = field_name
        super().__init__(message)
