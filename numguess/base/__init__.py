"""
Base package for the number game core.

This package contains the foundational classes of the game,
including state management, command processing, and configuration.
"""
