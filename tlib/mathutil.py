"""Small numeric helpers: angle conversion, stepping and rotation interpolation."""

import math

__all__ = [
    "rad2deg",
    "deg2rad",
    "clamp",
    "stepify",
    "stepify_round",
    "normalize",
    "sign",
    "lerp_rot_degrees",
    "lerp_rot_rads",
    "deg_diff",
    "rad_diff",
]


def _round_half_away(value):
    return math.copysign(math.floor(abs(value) + 0.5), value)


def rad2deg(rad):
    """Convert radians to degrees."""
    return rad * (180 / math.pi)


def deg2rad(deg):
    """Convert degrees to radians."""
    return deg * (math.pi / 180)


def clamp(value, low, high):
    """Limit ``value`` to the closed interval [low, high]."""
    if high < low:
        raise ValueError(f"invalid clamp bounds: low={low!r} > high={high!r}")
    if value < low:
        return low
    if high < value:
        return high
    return value


def stepify(value, step):
    """Snap ``value`` down to the nearest multiple of ``step``."""
    if value == 0:
        return value
    return math.floor(value / step) * step


def stepify_round(value, step):
    """Snap ``value`` to the nearest multiple of ``step`` (halves away from zero)."""
    if value == 0:
        return value
    return _round_half_away(value / step) * step


def normalize(value, low, high):
    """Map ``value`` from [low, high] onto [0, 1]."""
    return (value - low) / (high - low)


def sign(value):
    """Return -1 for negative values, 1 for positive ones and 0 for zero."""
    return (value > 0) - (value < 0)


def _lerp_rot(start, end, amount, half, full):
    if abs(end - start) > half:
        if end > start:
            start += full
        else:
            end += full
    value = start + (end - start) * amount
    if 0 <= value <= full:
        return value
    return math.fmod(value, full)


def lerp_rot_degrees(start, end, amount):
    """Interpolate between two angles in degrees along the shortest way round."""
    return _lerp_rot(start, end, amount, 180, 360)


def lerp_rot_rads(start, end, amount):
    """Interpolate between two angles in radians along the shortest way round."""
    return _lerp_rot(start, end, amount, math.pi, 2 * math.pi)


def deg_diff(a, b):
    """Smallest absolute difference between two angles in degrees."""
    diff = math.fmod(b - a, 360.0)
    return 180.0 - abs(abs(diff) - 180.0)


def rad_diff(a, b):
    """Smallest absolute difference between two angles in radians."""
    diff = math.fmod(b - a, 2 * math.pi)
    return math.pi - abs(abs(diff) - math.pi)