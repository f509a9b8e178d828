"""Hit tests and the centred-to-screen coordinate mapping."""

from __future__ import annotations


def is_area_hit(
    center_x: float,
    center_y: float,
    width: float,
    height: float,
    x: float,
    y: float,
) -> bool:
    """Return whether (x, y) lies strictly inside the rectangle centred at the given point."""
    half_w = width / 2
    half_h = height / 2
    return (
        center_x - half_w < x < center_x + half_w
        and center_y - half_h < y < center_y + half_h
    )


def is_circle_hit(
    center_x: float,
    center_y: float,
    diameter: float,
    x: float,
    y: float,
) -> bool:
    """Return whether (x, y) lies inside or on the circle of the given diameter."""
    radius = diameter / 2
    return (x - center_x) ** 2 + (y - center_y) ** 2 <= radius**2


def to_screen(
    x: float, y: float, window_width: float, window_height: float
) -> tuple[float, float]:
    """Map a point from centre-origin, y-up coordinates to screen coordinates.

    The window centre is (0, 0); x grows to the right and y grows upwards.
    """
    return x + window_width / 2, -y + window_height / 2