"""Command-line entry point: ``autofocus <frames_directory> <result_filepath>``.

Frames must be extracted beforehand, e.g.::

    ffmpeg -i <input_file> frame%05d.png -hide_banner

The frame number is expected in the last ``FRAME_NUMBER_DIGITS`` (default 5)
characters before the extension.  The result file is a tab-delimited table
of ``<frame number>\\t<sharpness>`` lines in ascending frame order.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from autofocus.analyzer import analyse_frames
from autofocus.config import get_settings
from autofocus.errors import AutofocusError, InvalidArgumentsError
from autofocus.results import sharpest_frame, write_results

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

_PROG = "autofocus"


@dataclass(frozen=True)
class ParsedArguments:
    frames_directory: Path
    result_file: Path


def parse_args(argv: list[str]) -> ParsedArguments:
    """Parse exactly two positional arguments.

    Raises:
        InvalidArgumentsError: On any other number of arguments.
    """
    # Arguments are taken verbatim: "-h" or "--" are paths like any other
    if len(argv) != 2:
        raise InvalidArgumentsError(
            f"invalid arguments. Usage:\n{_PROG} <frames_directory> <result_filepath>"
        )
    return ParsedArguments(
        frames_directory=Path(argv[0]),
        result_file=Path(argv[1]),
    )


def run(args: ParsedArguments) -> None:
    """Analyse the frames directory and write the result table."""
    settings = get_settings()
    frames = analyse_frames(args.frames_directory, settings.frame_number_digits)
    write_results(args.result_file, frames)
    logger.info("Wrote %d results to '%s'", len(frames), args.result_file)

    best = sharpest_frame(frames)
    if best is not None:
        logger.info("Sharpest frame: %d (sharpness=%s)", best.number, best.sharpness)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code.

    Any failure is reported on stdout and turned into ``EXIT_FAILURE``.
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        settings = get_settings()
        logging.basicConfig(
            level=getattr(logging, settings.log_level.upper(), logging.INFO)
        )
        run(parse_args(argv))
    except AutofocusError as exc:
        print(exc)
        return EXIT_FAILURE
    except Exception as exc:
        logger.debug("Unexpected failure", exc_info=True)
        print(exc)
        return EXIT_FAILURE

    return EXIT_SUCCESS


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
