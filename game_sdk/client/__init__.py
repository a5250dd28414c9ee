"""
Game Client Package

Provides the chat and action facades over a game connection.
"""

from .action_facade import ActionFacade
from .chat_facade import ChatFacade
from .game_client import GameClient, create_client

__all__ = ["ActionFacade", "ChatFacade", "GameClient", "create_client"]
