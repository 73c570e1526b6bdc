"""Conversion between canvas pixels and normalized coordinates.

Normalized space is centered on the canvas with each axis spanning -1..1.
"""

import math

# Smallest canvas dimension used in divisions, in pixels
MIN_DIMENSION = 1.0


def safe_size(size: tuple[float, float]) -> tuple[float, float]:
    """Return (width, height) with both dimensions at least MIN_DIMENSION."""
    width, height = size
    return max(width, MIN_DIMENSION), max(height, MIN_DIMENSION)


def canvas_center(size: tuple[float, float]) -> tuple[float, float]:
    width, height = safe_size(size)
    return width / 2, height / 2


def screen_to_normal(
    point: tuple[float, float], size: tuple[float, float]
) -> tuple[float, float]:
    """Convert a canvas-pixel point to normalized coordinates.

    Args:
        point: (x, y) in canvas pixels.
        size: Canvas (width, height).

    Returns:
        (x, y) with the canvas center at the origin.
    """
    half_w, half_h = canvas_center(size)
    x, y = point
    return (x - half_w) / half_w, (y - half_h) / half_h


def normal_to_screen(
    point: tuple[float, float], size: tuple[float, float]
) -> tuple[float, float]:
    """Convert a normalized point back to canvas pixels (inverse of screen_to_normal)."""
    half_w, half_h = canvas_center(size)
    x, y = point
    return x * half_w + half_w, y * half_h + half_h


def rotate_about(
    point: tuple[float, float], center: tuple[float, float], degrees: float
) -> tuple[float, float]:
    """Rotate a point around a center, clockwise on screen for positive degrees."""
    theta = math.radians(degrees)
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    return (
        center[0] + dx * cos_t - dy * sin_t,
        center[1] + dx * sin_t + dy * cos_t,
    )
