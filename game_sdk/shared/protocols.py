"""
Type Protocols and Interfaces

Defines the interface the SDK facades expect from a game connection.
"""

from abc import abstractmethod
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class GameConnection(Protocol):
    """
    Protocol for connections to a game server.
    
    Implementations own transport, serialization and delivery. Both
    methods may raise; failures are expected to be CollaboratorError
    subclasses.
    """
    
    @abstractmethod
    async def send_chat_message(self, message: str, channel: str) -> None:
        """
        Send a chat message.
        
        Args:
            message: The message text.
            channel: The channel to post to.
        """
        ...
    
    @abstractmethod
    async def send_game_action(self, action_type: str, action_data: Any) -> None:
        """
        Send a game action.
        
        Args:
            action_type: The action tag, e.g. "move".
            action_data: Action data in whatever shape the protocol expects.
        """
        ...
