"""Finger Runner: count raised fingers on a webcam and drive a 2D sprite."""

__version__ = "0.1.0"
