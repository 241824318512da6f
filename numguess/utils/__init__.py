"""Utility modules: logging setup, JSON helpers and save file handling."""
