"""Version range resolution for multi-branch release workflows."""

__version__ = "0.1.0"
