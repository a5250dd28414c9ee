"""
Game SDK

Typed chat and game action facades over a game server connection.
"""

from game_sdk.client import ActionFacade, ChatFacade, GameClient, create_client
from game_sdk.shared.exceptions import CollaboratorError, GameSDKError
from game_sdk.shared.protocols import GameConnection

__version__ = "1.0.0"

__all__ = [
    "ActionFacade",
    "ChatFacade",
    "CollaboratorError",
    "GameClient",
    "GameConnection",
    "GameSDKError",
    "create_client",
]
