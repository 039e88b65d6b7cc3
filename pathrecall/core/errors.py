"""Errors raised by the game core."""

from __future__ import annotations


class PathRecallError(Exception):
    """Base class for all game core errors."""


class InvalidLength(PathRecallError, ValueError):
    """A path length that cannot be produced or played."""


class InvalidGridConfig(PathRecallError, ValueError):
    """Grid size or anchor configuration is unusable."""


class InvalidPath(PathRecallError, ValueError):
    """A path refers to cells outside the grid."""


class IllegalTransition(PathRecallError, RuntimeError):
    """A command arrived in a phase that does not accept it."""


class ConfigError(PathRecallError, ValueError):
    """Malformed configuration file."""
