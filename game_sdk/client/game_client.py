"""
Game Client

Bundles the chat and action facades around a single game connection.
"""

import logging
from typing import Optional

from game_sdk.client.action_facade import ActionFacade
from game_sdk.client.chat_facade import ChatFacade
from game_sdk.shared.config import SDKConfig
from game_sdk.shared.logging_config import configure_from_config
from game_sdk.shared.protocols import GameConnection


logger = logging.getLogger(__name__)


class GameClient:
    """
    Entry point exposing ``chat`` and ``actions`` over one connection.
    
    Both facades share the connection passed in; its lifecycle stays with
    the caller.
    """
    
    __slots__ = ("_connection", "_chat", "_actions")
    
    def __init__(self, connection: GameConnection, trace_dispatch: bool = False) -> None:
        """
        Initialize the client.
        
        Args:
            connection: Connection shared by both facades.
            trace_dispatch: Whether facades log each dispatch at DEBUG level.
        """
        self._connection = connection
        self._chat = ChatFacade(connection, trace_dispatch=trace_dispatch)
        self._actions = ActionFacade(connection, trace_dispatch=trace_dispatch)
    
    @property
    def connection(self) -> GameConnection:
        return self._connection
    
    @property
    def chat(self) -> ChatFacade:
        """Chat messaging facade."""
        return self._chat
    
    @property
    def actions(self) -> ActionFacade:
        """Game action facade."""
        return self._actions


def create_client(
    connection: GameConnection,
    config: Optional[SDKConfig] = None,
    configure_logging: bool = False
) -> GameClient:
    """
    Create a GameClient from an SDK configuration.
    
    Args:
        connection: Connection shared by the facades.
        config: SDK configuration. Defaults to SDKConfig().
        configure_logging: Whether to apply the config's logging settings
            to the ``game_sdk`` logger. Off by default so the host
            application keeps control of logging.
        
    Returns:
        GameClient instance.
    """
    if config is None:
        config = SDKConfig()
    config.validate()
    
    if configure_logging:
        configure_from_config(config)
    
    logger.info("Game client created (trace_dispatch=%s)", config.trace_dispatch)
    return GameClient(connection, trace_dispatch=config.trace_dispatch)
