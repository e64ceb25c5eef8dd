from __future__ import annotations

from pathlib import Path
from typing import Optional


class ViewerError(Exception):
    """Base class for all errors raised by the viewer."""


class ScanCancelled(ViewerError):
    """Raised inside a scan once its cancellation token has been set."""


class DirectoryAccessError(ViewerError):
    """The scanned directory is missing, unreadable or not a directory."""

    def __init__(self, directory: Path, cause: Optional[OSError] = None):
        self.directory = Path(directory)
        self.cause = cause
        reason = cause.strerror if cause is not None and cause.strerror else "not accessible"
        super().__init__(f"Cannot read directory {self.directory}: {reason}")


class ImageDecodeError(ViewerError):
    """A file matched by extension could not be decoded as an image."""

    def __init__(self, path: Path, reason: str = ""):
        self.path = Path(path)
        super().__init__(f"Could not decode {self.path.name}: {reason}" if reason
                         else f"Could not decode {self.path.name}")


class ThemeLoadError(ViewerError):
    """A named theme is unknown or its style sheet cannot be read."""
