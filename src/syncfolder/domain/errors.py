"""Domain errors."""


class SyncFolderError(Exception):
    """Base error."""
    pass


class InvalidFolderConfigError(SyncFolderError, ValueError):
    """Folder configuration mapping could not be turned into a record."""
    pass


class MarkerError(SyncFolderError):
    """Folder marker could not be created."""
    pass
