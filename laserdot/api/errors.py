from __future__ import annotations


class LaserDotError(Exception):
    """Base class for every error raised by laserdot."""


class ConfigError(LaserDotError, ValueError):
    pass


class DimensionMismatchError(ConfigError):
    """A buffer does not have the shape or dtype the stage was set up for."""


def check_shape(name: str, arr, shape, dtype=None) -> None:
    if arr is None or getattr(arr, "shape", None) is None:
        raise DimensionMismatchError(f"{name}: expected array of shape {tuple(shape)}, got {type(arr).__name__}")
    if tuple(arr.shape) != tuple(shape):
        raise DimensionMismatchError(f"{name}: expected shape {tuple(shape)}, got {tuple(arr.shape)}")
    if dtype is not None and arr.dtype != dtype:
        raise DimensionMismatchError(f"{name}: expected dtype {dtype}, got {arr.dtype}")
