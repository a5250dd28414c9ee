"""
Chat Facade

High-level API for sending chat messages through a game connection.
"""

import logging

from game_sdk.shared.constants import GLOBAL_CHANNEL, MATCH_CHANNEL
from game_sdk.shared.models import ChatRequest
from game_sdk.shared.protocols import GameConnection


logger = logging.getLogger(__name__)


class ChatFacade:
    """
    Sends chat messages over a shared game connection.
    
    The facade does not own the connection and adds no validation, retries
    or queuing. Every call results in exactly one
    ``send_chat_message`` on the connection, and any exception it raises
    reaches the caller unchanged.
    """
    
    __slots__ = ("_connection", "_trace_dispatch")
    
    def __init__(self, connection: GameConnection, trace_dispatch: bool = False) -> None:
        """
        Initialize the chat facade.
        
        Args:
            connection: Connection used to deliver messages.
            trace_dispatch: Whether to log each dispatch at DEBUG level.
        """
        self._connection = connection
        self._trace_dispatch = trace_dispatch
    
    @property
    def connection(self) -> GameConnection:
        """The connection messages are sent through."""
        return self._connection
    
    async def send_message(self, message: str, channel: str = GLOBAL_CHANNEL) -> None:
        """
        Send a message to a chat channel.
        
        Args:
            message: The message text, passed through as is.
            channel: Target channel. Defaults to the global channel.
        """
        request = ChatRequest(message=message, channel=channel)
        if self._trace_dispatch:
            logger.debug("Dispatching chat message to channel %r", request.channel)
        await self._connection.send_chat_message(request.message, request.channel)
    
    async def send_to_match(self, message: str) -> None:
        """Send a message to the current match's channel."""
        await self.send_message(message, MATCH_CHANNEL)
