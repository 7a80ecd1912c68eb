"""Error taxonomy for the frame sharpness pipeline.

Every failure is fatal to a run.  Errors propagate unchanged to the entry
point in ``autofocus.main``, which prints the message and exits non-zero.
"""

from pathlib import Path


class AutofocusError(Exception):
    """Base class for all pipeline errors.

    ``path`` is the file or directory the error refers to, if any.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidArgumentsError(AutofocusError):
    """Raised when the command line does not have exactly two positionals."""


class InvalidDirectoryError(AutofocusError):
    """Raised when the frames directory does not exist or cannot be listed."""


class InvalidFilenameError(AutofocusError):
    """Raised when a filename is too short to hold the frame number suffix."""


class FrameNumberParseError(AutofocusError):
    """Raised when the frame number suffix is not a plain decimal number."""


class ImageLoadError(AutofocusError):
    """Raised when an image cannot be read, decoded, or has no pixels."""


class OutputWriteError(AutofocusError):
    """Raised when the result file cannot be opened or written."""
