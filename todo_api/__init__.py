"""
Todo Auth API

A small task-tracking service protected by JWT bearer authentication.
"""

__version__ = "0.1.0"
