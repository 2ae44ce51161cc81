"""Custom exceptions for credit resolver."""


class CreditResolverError(Exception):
    """Base exception for credit resolver operations."""

    pass


class RemoteLookupError(CreditResolverError):
    """Raised when a remote entity lookup fails."""

    def __init__(self, url: str, status_code: int | None = None, message: str = ""):
        self.url = url
        self.status_code = status_code
        if not message:
            if status_code is None:
                message = f"Remote lookup failed: {url}"
            else:
                message = f"Remote lookup failed with status {status_code}: {url}"
        super().__init__(message)


class StorageError(CreditResolverError):
    """Raised when a string store can not be read or written."""

    pass
