"""Arrange programs on a scene with priorities and linked files, and launch them as one session."""

__version__ = "1.0.0"