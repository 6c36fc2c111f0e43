"""Base utilities for Mahjong game-playing programs: INI configuration, SGF logs, hashing, sampling, timing and a client socket."""

__version__ = "1.0.0"