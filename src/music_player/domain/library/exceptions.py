"""Library-specific exceptions for error handling."""


class LibraryError(Exception):
    """Base exception for library operations."""

    pass


class EmptyCatalog(LibraryError):
    """Raised when loading produced no playable tracks."""

    def __init__(self, source: object = None, message: str = None):
        self.source = source
        if message is None:
            message = (
                f"No supported audio files found in: {source}"
                if source is not None
                else "No supported audio files found"
            )
        super().__init__(message)
