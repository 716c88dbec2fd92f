"""
Archiver Errors

Everything except MediaDownloadError stops the run and is reported to the caller.
"""


class ArchiverError(Exception):
    """Base class for all archiver failures."""

    pass


class InvalidUrlError(ArchiverError):
    """Raised when a URL is not a Slack thread permalink."""

    pass


class ConfigurationError(ArchiverError):
    """Raised when required configuration (the Slack token) is missing."""

    pass


class ThreadFetchError(ArchiverError):
    """Raised when Slack refuses or fails to return the thread."""

    pass


class MediaDownloadError(ArchiverError):
    """Raised for a single failed image download - logged, never fatal."""

    pass


class ArchiveError(ArchiverError):
    """Raised when the ZIP archive cannot be written."""

    pass
