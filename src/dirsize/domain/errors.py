from __future__ import annotations

"""
Domain Exceptions.

Failures raised by the scanner. The interface layer decides how they map
to diagnostics and exit codes.
"""


class DirsizeError(Exception):
    """Base class for dirsize failures."""


class MetadataUnavailable(DirsizeError):
    """
    The filesystem refused to report status for a path.

    Attributes:
        path: The offending path, as it would be displayed.
        reason: Underlying OS error message.
    """
    template = "Failed to read file {path}"

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        super().__init__(self.template.format(path=path))


class DirectoryUnreadable(MetadataUnavailable):
    """Directory status was read, but its entries could not be listed."""
    template = "Failed to read directory {path}"
