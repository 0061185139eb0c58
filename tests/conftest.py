import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Allow running the suite from a checkout without installing the package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from PIL import Image  # noqa: E402


@pytest.fixture
def gradient_image() -> Image.Image:
    """Return a 64x48 RGB image with distinct values in every channel."""

    height, width = 48, 64
    yy, xx = np.mgrid[0:height, 0:width]
    pixels = np.stack(
        [
            (xx * 4) % 256,
            (yy * 5) % 256,
            ((xx + yy) * 3) % 256,
        ],
        axis=-1,
    ).astype(np.uint8)
    return Image.fromarray(pixels)
