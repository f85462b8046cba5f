# sp3merge/utils/errors.py
from __future__ import annotations

from typing import Optional


class Sp3MergeError(RuntimeError):
    """
    Base class of every fatal error raised by the merger.
    The CLI prints the message (no traceback) and exits with status 1.
    """


class ConfigurationError(Sp3MergeError):
    """
    Raised for invalid or missing user-provided config.
    Should NOT print traceback.
    """


class InputAccessError(Sp3MergeError):
    """An input orbit file cannot be opened, read or decompressed."""


class ParseError(Sp3MergeError):
    """Malformed SP3 content."""

    def __init__(self, message: str, source: str = "<string>", line_no: Optional[int] = None):
        self.source = source
        self.line_no = line_no
        where = f"{source}:{line_no}" if line_no is not None else source
        super().__init__(f"{where}: {message}")


class NoSatelliteDataError(Sp3MergeError):
    """No object in the first input, or nothing left to write after merging."""


class ObjectNotFoundError(Sp3MergeError):
    """The requested object identifier is absent from an input."""


class EphemerisMismatchError(Sp3MergeError):
    """Inputs of one merge disagree on reference frame or time system."""


class MissingVelocityError(Sp3MergeError):
    """A sample has no velocity while the record format requires one."""


class InvalidObjectIdError(Sp3MergeError):
    """Object identifier does not fit the 3-column SP3 satellite field."""
