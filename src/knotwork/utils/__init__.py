"""Utility helpers shared across knotwork."""
