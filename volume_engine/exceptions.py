"""
Custom exception classes for the volume engine.
"""


class VolumeEngineError(Exception):
    """Base exception for all volume engine errors."""
    pass


class VolumeTransferError(VolumeEngineError):
    """Raised when a volume transfer function is given invalid parameters."""
    pass


class ConfigurationError(VolumeEngineError):
    """Raised when volume settings are malformed."""
    pass


__all__ = ['VolumeEngineError', 'VolumeTransferError', 'ConfigurationError']
