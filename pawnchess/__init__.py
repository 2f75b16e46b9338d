"""Pawns-Only Chess: a rules engine for the pawns-only chess variant."""

__version__ = "0.1.0"
