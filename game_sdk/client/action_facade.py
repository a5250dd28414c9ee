"""
Action Facade

High-level API for submitting game actions through a game connection.
"""

import logging
from typing import Any, TypeVar

from game_sdk.shared.models import GenericAction, MoveAction, ShootAction
from game_sdk.shared.protocols import GameConnection


logger = logging.getLogger(__name__)

V = TypeVar("V")
D = TypeVar("D")


class ActionFacade:
    """
    Builds game action payloads and sends them over a shared connection.
    
    Coordinates are forwarded exactly as given: no bounds checks, unit
    conversion or normalization. Any exception raised by the connection
    reaches the caller unchanged.
    """
    
    __slots__ = ("_connection", "_trace_dispatch")
    
    def __init__(self, connection: GameConnection, trace_dispatch: bool = False) -> None:
        """
        Initialize the action facade.
        
        Args:
            connection: Connection used to deliver actions.
            trace_dispatch: Whether to log each dispatch at DEBUG level.
        """
        self._connection = connection
        self._trace_dispatch = trace_dispatch
    
    @property
    def connection(self) -> GameConnection:
        """The connection actions are sent through."""
        return self._connection
    
    async def send_move(self, x: float, y: float, z: float) -> None:
        """
        Send a move action.
        
        Args:
            x: Target x coordinate.
            y: Target y coordinate.
            z: Target z coordinate.
        """
        action = MoveAction(x=x, y=y, z=z)
        await self._dispatch(action.action_type.value, action.to_payload())
    
    async def send_shoot(self, x: float, y: float, z: float, velocity: V) -> None:
        """
        Send a shoot action.
        
        Args:
            x: Origin x coordinate.
            y: Origin y coordinate.
            z: Origin z coordinate.
            velocity: Projectile velocity in the protocol's own shape. It is
                attached to the payload as the same object.
        """
        action = ShootAction(x=x, y=y, z=z, velocity=velocity)
        await self._dispatch(action.action_type.value, action.to_payload())
    
    async def send_action(self, action_type: str, action_data: D) -> None:
        """
        Send an arbitrary action.
        
        Both arguments reach the connection unchanged.
        
        Args:
            action_type: The action tag.
            action_data: Action data, not wrapped or copied.
        """
        action = GenericAction(action_type=action_type, action_data=action_data)
        await self._dispatch(action.action_type, action.to_payload())
    
    async def _dispatch(self, action_type: str, action_data: Any) -> None:
        if self._trace_dispatch:
            logger.debug("Dispatching %r action", action_type)
        await self._connection.send_game_action(action_type, action_data)
