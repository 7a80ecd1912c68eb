"""Frame number extraction from fixed-width filename suffixes.

Frames are expected to be named ``<prefix><NNNNN>.<extension>``, e.g. as
written by ``ffmpeg -i clip.mp4 frame%05d.png``.  The number is taken
positionally from the ``frame_number_digits`` characters immediately before
the extension; no scanning for digits is done.
"""

from pathlib import Path

from autofocus.errors import FrameNumberParseError, InvalidFilenameError

DEFAULT_FRAME_NUMBER_DIGITS = 5


def extract_frame_number(
    filepath: Path | str,
    frame_number_digits: int = DEFAULT_FRAME_NUMBER_DIGITS,
) -> int:
    """Return the frame number encoded in the filename of ``filepath``.

    Only the final path component is inspected; directory names never take
    part in the suffix window.

    Args:
        filepath: Path to a frame image, e.g. ``frames/frame00042.png``.
        frame_number_digits: Width of the zero-padded number suffix.

    Returns:
        The non-negative frame number (``frame00042.png`` -> 42).

    Raises:
        ValueError: If ``frame_number_digits`` is not positive.
        InvalidFilenameError: If the filename is not longer than the
            extension plus ``frame_number_digits`` characters.
        FrameNumberParseError: If the suffix window is not made of ASCII
            decimal digits only.
    """
    if frame_number_digits < 1:
        raise ValueError(
            f"frame_number_digits must be positive, got {frame_number_digits}"
        )

    path = Path(filepath)
    name = path.name
    extension_size = len(path.suffix)

    if len(name) <= extension_size + frame_number_digits:
        raise InvalidFilenameError(f"invalid filename: '{path}'", path=path)

    start = len(name) - extension_size - frame_number_digits
    window = name[start : start + frame_number_digits]

    # int() alone would accept signs, whitespace, underscores and non-ASCII
    # digits
    if not (window.isascii() and window.isdigit()):
        raise FrameNumberParseError(
            f"unable to parse frame number from file '{path}'", path=path
        )

    return int(window, 10)
