"""Custom exceptions for deps-finder."""


class DepsFinderError(Exception):
    """Base exception for all deps-finder errors."""


class ManifestError(DepsFinderError):
    """Raised when the package manifest cannot be loaded."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{message}: {path}")


class ManifestNotFoundError(ManifestError):
    """Raised when package.json does not exist."""

    def __init__(self, path: str):
        super().__init__(path, "package.json not found")


class ManifestReadError(ManifestError):
    """Raised when package.json exists but cannot be read."""

    def __init__(self, path: str, reason: str):
        self.reason = reason
        super().__init__(path, f"Cannot read package.json ({reason})")


class ManifestParseError(ManifestError):
    """Raised when package.json is not valid JSON or not a JSON object."""

    def __init__(self, path: str, reason: str):
        self.reason = reason
        super().__init__(path, f"Invalid package.json ({reason})")


class SourceRootNotFoundError(DepsFinderError):
    """Raised when the source directory to scan does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Source directory not found: {path}")
