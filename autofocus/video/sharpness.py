"""Frame sharpness scoring via peak Laplacian response.

Pipeline (fixed):

1. 3×3 Gaussian blur to suppress sensor and compression noise.
2. BGR → grayscale.
3. Laplacian (ksize=3, scale=1, delta=0, replicated border) into a signed
   16-bit grid so negative and >255 responses are not clipped.
4. Combined min/max scan; the global maximum is the sharpness score.

An in-focus frame has stronger, better defined edges and therefore a higher
peak response than a defocused one.  Scores are not normalised and are only
comparable within one set of frames.
"""

import logging
from pathlib import Path

import cv2
import numpy as np

from autofocus.errors import ImageLoadError

logger = logging.getLogger(__name__)

_BLUR_KERNEL = (3, 3)
_LAPLACIAN_DEPTH = cv2.CV_16S
_LAPLACIAN_KSIZE = 3
_LAPLACIAN_BORDER = cv2.BORDER_REPLICATE


def read_image(filepath: Path | str) -> np.ndarray:
    """Read and decode the image at ``filepath`` into a BGR ndarray.

    The file is read as bytes and decoded with ``cv2.imdecode`` so paths are
    not limited to what ``cv2.imread`` can open.

    Raises:
        ImageLoadError: If the file cannot be read, cannot be decoded, or
            decodes to an image with zero width or height.
    """
    path = Path(filepath)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ImageLoadError(
            f"error while opening image '{path}': {exc.strerror or exc}", path=path
        ) from exc

    if not data:
        raise ImageLoadError(f"error while opening image '{path}'", path=path)

    try:
        image = cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_COLOR)
    except cv2.error as exc:
        raise ImageLoadError(
            f"error while opening image '{path}'", path=path
        ) from exc

    if image is None or image.shape[0] == 0 or image.shape[1] == 0:
        raise ImageLoadError(f"error while opening image '{path}'", path=path)

    return image


def compute_sharpness(image: np.ndarray) -> float:
    """Return the peak Laplacian response of a BGR frame.

    Higher values indicate a sharper frame.  A flat, edgeless frame scores
    exactly zero.
    """
    blurred = cv2.GaussianBlur(image, _BLUR_KERNEL, 0, 0, borderType=cv2.BORDER_DEFAULT)
    gray = cv2.cvtColor(blurred, cv2.COLOR_BGR2GRAY)
    response = cv2.Laplacian(
        gray,
        _LAPLACIAN_DEPTH,
        ksize=_LAPLACIAN_KSIZE,
        scale=1,
        delta=0,
        borderType=_LAPLACIAN_BORDER,
    )
    _min_val, max_val, _min_loc, _max_loc = cv2.minMaxLoc(response)
    return float(max_val)


def calculate_sharpness(filepath: Path | str) -> float:
    """Read the image at ``filepath`` and return its sharpness score."""
    score = compute_sharpness(read_image(filepath))
    logger.debug("Sharpness %s -> %s", filepath, score)
    return score
