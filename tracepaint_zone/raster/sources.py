"""
Paint Sources Module
====================

Raster accessors answering "is this pixel painted?".

The coverage estimator only sees the PaintSource protocol; how paint is
recognized belongs to the raster:

- CanvasRaster: composited visible canvas (white background), a pixel is
  paint when it has alpha and is not near-white
- PaintLayer: paint-only layer on a transparent background, any alpha
  counts as paint

Buffers are RGBA, row-major, indexed [y, x]. The painted mask is computed
once at construction so per-pixel queries are O(1).
"""

import cv2
import numpy as np
from typing import Protocol

from tracepaint_zone.config import DEFAULT_WHITE_TOLERANCE


class PaintSource(Protocol):
    """Protocol for raster accessors (interface)."""

    @property
    def width(self) -> int:
        ...

    @property
    def height(self) -> int:
        ...

    def is_painted(self, x: int, y: int) -> bool:
        """Check if the pixel at (x, y) counts as painted."""
        ...


def bgr_to_rgba(image: np.ndarray) -> np.ndarray:
    """
    Convert an OpenCV image (gray, BGR or BGRA) to RGBA.

    Raises:
        ValueError: If the array layout is not an image
    """
    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)
    if image.ndim == 3 and image.shape[2] == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)
    if image.ndim == 3 and image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)
    raise ValueError(f"Unsupported image shape {image.shape}")


def _as_rgba(pixels: np.ndarray) -> np.ndarray:
    if not isinstance(pixels, np.ndarray):
        raise TypeError(f"pixels must be np.ndarray, got {type(pixels)}")
    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        raise ValueError(f"pixels must be HxWx3 or HxWx4, got shape {pixels.shape}")
    if pixels.shape[2] == 3:
        alpha = np.full(pixels.shape[:2] + (1,), 255, dtype=pixels.dtype)
        pixels = np.concatenate([pixels, alpha], axis=2)
    return pixels


class _MaskSource:
    """Shared bounds-checked lookup over a precomputed boolean mask."""

    def __init__(self, mask: np.ndarray):
        self._mask = mask
        self._mask.flags.writeable = False

    @property
    def width(self) -> int:
        return self._mask.shape[1]

    @property
    def height(self) -> int:
        return self._mask.shape[0]

    @property
    def mask(self) -> np.ndarray:
        """Read-only HxW boolean painted mask."""
        return self._mask

    def is_painted(self, x: int, y: int) -> bool:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        return bool(self._mask[y, x])


class CanvasRaster(_MaskSource):
    """
    Composited visible canvas.

    A pixel is painted when alpha > 0 and at least one of R, G, B is at or
    below white_tolerance (the white background and outline halo are not
    paint).

    Args:
        pixels: HxWx4 RGBA (or HxWx3 RGB, treated as opaque) uint8 array
        white_tolerance: Channel value above which a pixel is near-white
    """

    def __init__(self, pixels: np.ndarray, white_tolerance: int = DEFAULT_WHITE_TOLERANCE):
        rgba = _as_rgba(pixels)
        self.white_tolerance = white_tolerance

        rgb = rgba[:, :, :3]
        near_white = np.all(rgb > white_tolerance, axis=2)
        super().__init__((rgba[:, :, 3] > 0) & ~near_white)

    @classmethod
    def from_image(cls, image: np.ndarray, white_tolerance: int = DEFAULT_WHITE_TOLERANCE) -> "CanvasRaster":
        """Build from an OpenCV (BGR/BGRA/gray) image."""
        return cls(bgr_to_rgba(image), white_tolerance=white_tolerance)


class PaintLayer(_MaskSource):
    """
    Paint-only layer with a transparent background.

    Any pixel with alpha > 0 is painted; no whiteness check.

    Args:
        pixels: HxWx4 RGBA array, or an HxW alpha/boolean array
    """

    def __init__(self, pixels: np.ndarray):
        if not isinstance(pixels, np.ndarray):
            raise TypeError(f"pixels must be np.ndarray, got {type(pixels)}")
        if pixels.ndim == 2:
            mask = pixels > 0
        elif pixels.ndim == 3 and pixels.shape[2] == 4:
            mask = pixels[:, :, 3] > 0
        else:
            raise ValueError(f"pixels must be HxWx4 or HxW, got shape {pixels.shape}")
        super().__init__(np.array(mask, dtype=bool))

    @classmethod
    def from_image(cls, image: np.ndarray) -> "PaintLayer":
        """
        Build from an OpenCV image; it must carry an alpha channel.

        Raises:
            ValueError: If the image has no alpha channel
        """
        if image.ndim != 3 or image.shape[2] != 4:
            raise ValueError(
                f"Paint layer image needs an alpha channel, got shape {image.shape}"
            )
        return cls(bgr_to_rgba(image))
