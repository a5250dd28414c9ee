"""
Custom Exceptions

Defines custom exception classes for the game SDK.
"""

from typing import Optional


class GameSDKError(Exception):
    """Base exception class for all game SDK errors."""
    pass


class CollaboratorError(GameSDKError):
    """Raised by a game connection when a send operation fails."""
    
    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation


class TransportError(CollaboratorError):
    """Raised when the underlying network transport fails."""
    pass


class SerializationError(CollaboratorError):
    """Raised when a payload cannot be encoded for the wire."""
    pass


class ProtocolRejectedError(CollaboratorError):
    """Raised when the game server rejects a message."""
    
    def __init__(self, message: str, operation: Optional[str] = None, reason: Optional[str] = None):
        super().__init__(message, operation=operation)
        self.reason = reason


class ConfigurationError(GameSDKError):
    """Raised when configuration-related errors occur."""
    
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.details = details
