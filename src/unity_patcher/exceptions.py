"""
Custom exceptions for unity-patcher tool
"""


class PatcherError(Exception):
    """Base exception for patcher errors"""
    pass


class CatalogError(PatcherError):
    """Raised when a patch catalog cannot be loaded"""
    pass
