from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from autofocus.errors import OutputWriteError


@dataclass(frozen=True)
class FrameInfo:
    """Sharpness analysis result for one frame image."""

    number: int  # frame number parsed from the filename
    sharpness: float  # peak Laplacian response; higher = sharper


def format_result(frame: FrameInfo) -> str:
    """Render one result line: ``<number>\\t<sharpness>\\n``."""
    return f"{frame.number}\t{frame.sharpness}\n"


def write_results(filepath: Path | str, frames: Iterable[FrameInfo]) -> None:
    """Write ``frames`` to ``filepath`` as a tab-delimited text table.

    The file is created or truncated.  Lines are written in the order given,
    without header.  Writes are not transactional: a failure part way
    through leaves a partially written file behind.

    Raises:
        OutputWriteError: If the file cannot be opened or written.
    """
    path = Path(filepath)
    try:
        with path.open("w", encoding="utf-8", newline="\n") as fh:
            for frame in frames:
                fh.write(format_result(frame))
    except OSError as exc:
        raise OutputWriteError(
            f"unable to write result file '{path}': {exc.strerror or exc}", path=path
        ) from exc


def sharpest_frame(frames: Sequence[FrameInfo]) -> FrameInfo | None:
    """Return the sharpest frame, the lowest frame number winning ties.

    Returns None for an empty sequence.
    """
    if not frames:
        return None
    return max(frames, key=lambda frame: (frame.sharpness, -frame.number))
