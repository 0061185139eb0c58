"""Pillow and numpy implementations of the seven built-in filters.

Each class mirrors the Core Image filter of the same name closely enough for
interactive previews: the accepted inputs match, and the defaults are taken
from the Core Image reference so a freshly created filter renders sensibly
before any slider has moved.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from PIL import Image, ImageFilter

from .descriptor import (
    FilterDescriptor,
    INPUT_INTENSITY_KEY,
    INPUT_RADIUS_KEY,
    INPUT_SCALE_KEY,
)

# Classic sepia matrix in the 12-tuple layout accepted by ``Image.convert``.
_SEPIA_MATRIX = (
    0.393, 0.769, 0.189, 0.0,
    0.349, 0.686, 0.168, 0.0,
    0.272, 0.534, 0.131, 0.0,
)


def _split_alpha(image: Image.Image) -> tuple[Image.Image, Optional[Image.Image]]:
    """Return the RGB part of *image* and its alpha band, if any."""

    if image.mode == "RGBA":
        return image.convert("RGB"), image.getchannel("A")
    if image.mode == "RGB":
        return image, None
    if "A" in image.getbands() or (image.mode == "P" and "transparency" in image.info):
        rgba = image.convert("RGBA")
        return rgba.convert("RGB"), rgba.getchannel("A")
    return image.convert("RGB"), None


def _merge_alpha(rgb: Image.Image, alpha: Optional[Image.Image]) -> Image.Image:
    if alpha is None:
        return rgb
    result = rgb.convert("RGBA")
    result.putalpha(alpha)
    return result


def _to_uint8(array: np.ndarray) -> np.ndarray:
    return np.clip(np.rint(array), 0, 255).astype(np.uint8)


class Crystallize(FilterDescriptor):
    """Polygonal cells coloured from the pixel under each cell's seed."""

    name = "CICrystallize"
    defaults = {INPUT_RADIUS_KEY: 20.0}

    seed = 0x5EED
    """Seed for the jittered grid so repeated renders are identical."""

    def _render(self, image: Image.Image) -> Image.Image:
        rgb, alpha = _split_alpha(image)
        pitch = max(1, int(round(self.value(INPUT_RADIUS_KEY))))
        if pitch == 1:
            return _merge_alpha(rgb.copy(), alpha)

        pixels = np.asarray(rgb)
        height, width = pixels.shape[:2]
        rows = height // pitch + 1
        cols = width // pitch + 1

        # One seed per grid cell, jittered inside its cell.  Candidates for the
        # nearest seed come from the 3x3 block of cells around each pixel.
        jitter = np.random.default_rng(self.seed).random((rows, cols, 2))
        seed_y = np.clip((np.arange(rows)[:, None] + jitter[..., 0]) * pitch, 0, height - 1)
        seed_x = np.clip((np.arange(cols)[None, :] + jitter[..., 1]) * pitch, 0, width - 1)

        yy, xx = np.mgrid[0:height, 0:width]
        cell_y = yy // pitch
        cell_x = xx // pitch
        best = np.full((height, width), np.inf)
        best_y = np.zeros((height, width), dtype=np.intp)
        best_x = np.zeros((height, width), dtype=np.intp)
        for dy in (-1, 0, 1):
            cy = np.clip(cell_y + dy, 0, rows - 1)
            for dx in (-1, 0, 1):
                cx = np.clip(cell_x + dx, 0, cols - 1)
                sy = seed_y[cy, cx]
                sx = seed_x[cy, cx]
                dist = (sy - yy) ** 2 + (sx - xx) ** 2
                closer = dist < best
                best = np.where(closer, dist, best)
                best_y = np.where(closer, sy.astype(np.intp), best_y)
                best_x = np.where(closer, sx.astype(np.intp), best_x)

        result = Image.fromarray(pixels[best_y, best_x])
        return _merge_alpha(result, alpha)


class Edges(FilterDescriptor):
    """Edge magnitude, brightened by the intensity input."""

    name = "CIEdges"
    defaults = {INPUT_INTENSITY_KEY: 1.0}

    def _render(self, image: Image.Image) -> Image.Image:
        rgb, alpha = _split_alpha(image)
        edges = np.asarray(rgb.filter(ImageFilter.FIND_EDGES), dtype=np.float32)
        gain = max(0.0, self.value(INPUT_INTENSITY_KEY)) * 10.0
        result = Image.fromarray(_to_uint8(edges * gain))
        return _merge_alpha(result, alpha)


class GaussianBlur(FilterDescriptor):
    name = "CIGaussianBlur"
    defaults = {INPUT_RADIUS_KEY: 10.0}

    def _render(self, image: Image.Image) -> Image.Image:
        radius = max(0.0, self.value(INPUT_RADIUS_KEY))
        if radius == 0.0:
            return image.copy()
        return image.filter(ImageFilter.GaussianBlur(radius))


class Pixellate(FilterDescriptor):
    """Square blocks whose edge length is the scale input."""

    name = "CIPixellate"
    defaults = {INPUT_SCALE_KEY: 8.0}

    def _render(self, image: Image.Image) -> Image.Image:
        scale = max(1, int(round(self.value(INPUT_SCALE_KEY))))
        if scale == 1:
            return image.copy()
        width, height = image.size
        cols = math.ceil(width / scale)
        rows = math.ceil(height / scale)
        small = image.resize((cols, rows), Image.Resampling.BOX)
        blocks = small.resize((cols * scale, rows * scale), Image.Resampling.NEAREST)
        return blocks.crop((0, 0, width, height))


class SepiaTone(FilterDescriptor):
    name = "CISepiaTone"
    defaults = {INPUT_INTENSITY_KEY: 1.0}

    def _render(self, image: Image.Image) -> Image.Image:
        rgb, alpha = _split_alpha(image)
        sepia = rgb.convert("RGB", _SEPIA_MATRIX)
        amount = min(1.0, max(0.0, self.value(INPUT_INTENSITY_KEY)))
        return _merge_alpha(Image.blend(rgb, sepia, amount), alpha)


class UnsharpMask(FilterDescriptor):
    name = "CIUnsharpMask"
    defaults = {INPUT_RADIUS_KEY: 2.5, INPUT_INTENSITY_KEY: 0.5}

    def _render(self, image: Image.Image) -> Image.Image:
        rgb, alpha = _split_alpha(image)
        radius = max(0.0, self.value(INPUT_RADIUS_KEY))
        percent = int(round(max(0.0, self.value(INPUT_INTENSITY_KEY)) * 100))
        if radius == 0.0 or percent == 0:
            return _merge_alpha(rgb.copy(), alpha)
        sharpened = rgb.filter(ImageFilter.UnsharpMask(radius=radius, percent=percent, threshold=0))
        return _merge_alpha(sharpened, alpha)


class Vignette(FilterDescriptor):
    """Darken towards the corners.

    The radius input selects the untouched core as a fraction of the
    half-diagonal (``radius / 200``); intensity controls how dark the corners
    become.  Negative intensities brighten instead, as in Core Image.
    """

    name = "CIVignette"
    defaults = {INPUT_RADIUS_KEY: 1.0, INPUT_INTENSITY_KEY: 0.0}

    def _render(self, image: Image.Image) -> Image.Image:
        rgb, alpha = _split_alpha(image)
        pixels = np.asarray(rgb, dtype=np.float32)
        height, width = pixels.shape[:2]
        core = min(1.0, max(0.0, self.value(INPUT_RADIUS_KEY) / 200.0))
        intensity = self.value(INPUT_INTENSITY_KEY)

        yy, xx = np.mgrid[0:height, 0:width].astype(np.float32)
        half_diagonal = max(1e-6, math.hypot(width / 2.0, height / 2.0))
        distance = np.hypot(yy - (height - 1) / 2.0, xx - (width - 1) / 2.0) / half_diagonal
        falloff = np.clip((distance - core) / max(1e-6, 1.0 - core), 0.0, 1.0)
        factor = np.clip(1.0 - intensity * falloff * falloff, 0.0, None)

        result = Image.fromarray(_to_uint8(pixels * factor[..., None]))
        return _merge_alpha(result, alpha)


BUILTIN_FILTERS: tuple[type[FilterDescriptor], ...] = (
    Crystallize,
    Edges,
    GaussianBlur,
    Pixellate,
    SepiaTone,
    UnsharpMask,
    Vignette,
)

__all__ = [
    "BUILTIN_FILTERS",
    "Crystallize",
    "Edges",
    "GaussianBlur",
    "Pixellate",
    "SepiaTone",
    "UnsharpMask",
    "Vignette",
]
