"""Frame set analyzer, directory → per-frame sharpness → ordered results.

For every entry of the frames directory:

1. The frame number is parsed from the filename suffix.
2. The image is decoded and its sharpness scored.
3. Both are combined into a ``FrameInfo``.

Directory listing order is unspecified, so the results are sorted by frame
number afterwards.  The first entry that fails aborts the whole analysis;
there is no skip-and-continue mode.
"""

import logging
from collections import Counter
from pathlib import Path

from autofocus.errors import InvalidDirectoryError
from autofocus.results import FrameInfo
from autofocus.video.frame_number import (
    DEFAULT_FRAME_NUMBER_DIGITS,
    extract_frame_number,
)
from autofocus.video.sharpness import calculate_sharpness

logger = logging.getLogger(__name__)


def analyse_frame(
    filepath: Path | str,
    frame_number_digits: int = DEFAULT_FRAME_NUMBER_DIGITS,
) -> FrameInfo:
    """Analyse a single frame image and return its ``FrameInfo``."""
    return FrameInfo(
        number=extract_frame_number(filepath, frame_number_digits),
        sharpness=calculate_sharpness(filepath),
    )


def analyse_frames(
    directory: Path | str,
    frame_number_digits: int = DEFAULT_FRAME_NUMBER_DIGITS,
) -> list[FrameInfo]:
    """Analyse every entry of ``directory``, sorted by frame number.

    Raises:
        InvalidDirectoryError: If ``directory`` is not an existing directory
            or cannot be listed.
        AutofocusError: The first error raised while analysing an entry,
            unchanged.
    """
    path = Path(directory)
    if not path.is_dir():
        raise InvalidDirectoryError(f"invalid data directory '{path}'.", path=path)

    try:
        entries = list(path.iterdir())
    except OSError as exc:
        raise InvalidDirectoryError(
            f"unable to list data directory '{path}': {exc.strerror or exc}",
            path=path,
        ) from exc

    frames = [analyse_frame(entry, frame_number_digits) for entry in entries]

    # iterdir() yields entries in arbitrary order; sorted() is stable
    frames = sorted(frames, key=lambda frame: frame.number)

    counts = Counter(frame.number for frame in frames)
    for number, count in counts.items():
        if count > 1:
            logger.warning(
                "Frame number %d appears %d times in '%s'", number, count, path
            )

    logger.info("Analysed %d frames in '%s'", len(frames), path)
    return frames
