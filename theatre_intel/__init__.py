"""
Theatre Intel - operational context intelligence for theatre scheduling.
"""

__version__ = "1.0.0"
