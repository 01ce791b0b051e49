"""
Exception classes for mufetch.

Exception Hierarchy:
    MufetchError (base)
        ConfigError - Configuration file or credential issues
        SpotifyError - Spotify API issues (authentication, lookups)
        ImageError - Cover image download/decode issues
"""


class MufetchError(Exception):
    """
    Base exception for all mufetch errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context (e.g. IDs, URLs).

    Example:
        try:
            # some operation
        except MufetchError as e:
            logger.error(f"Operation failed: {e.message}")
            if e.details:
                logger.debug(f"Details: {e.details}")
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error description shown to the user.
            details: Optional dictionary containing additional context.
                     Common keys include:
                     - 'file_path': Config file involved in the error
                     - 'http_status': HTTP status returned by the API
                     - 'original_error': The underlying exception text
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the error message for display."""
        return self.message


class ConfigError(MufetchError):
    """
    Raised when the configuration file cannot be read, parsed or written,
    or when the Spotify credentials are missing.

    This is a CRITICAL error that stops program execution.

    Example:
        raise ConfigError(
            "'spotify.client_id' must be a non-empty string",
            details={'field': 'spotify.client_id'}
        )
    """
    pass


class SpotifyError(MufetchError):
    """
    Raised when there's an issue with the Spotify API.

    Can be CRITICAL (auth failure) or NON-CRITICAL (a supplemental lookup
    such as an artist's top tracks failed and the panel line is dropped).

    Attributes:
        is_auth_error: True if the client-credentials exchange failed.
        is_rate_limit: True if Spotify answered with HTTP 429.
    """

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        is_auth_error: bool = False,
        is_rate_limit: bool = False
    ) -> None:
        """
        Initialize Spotify error with additional flags.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
            is_auth_error: Set to True for authentication failures.
            is_rate_limit: Set to True for rate limit responses.
        """
        super().__init__(message, details)
        self.is_auth_error = is_auth_error
        self.is_rate_limit = is_rate_limit


class ImageError(MufetchError):
    """
    Raised when a cover image cannot be downloaded or decoded.

    Never reaches the user: the image renderer catches it and
    substitutes the placeholder box.
    """
    pass
