"""
Data Models

Defines the payload records assembled by the SDK facades.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, TypeVar

from .constants import DEFAULT_CHANNEL, MOVE_ACTION, SHOOT_ACTION


V = TypeVar("V")
D = TypeVar("D")


class ActionType(str, Enum):
    """Enumeration of action tags with a dedicated facade method."""
    MOVE = MOVE_ACTION
    SHOOT = SHOOT_ACTION


@dataclass(frozen=True)
class ChatRequest:
    """A chat message addressed to a channel."""
    message: str
    channel: str = DEFAULT_CHANNEL


@dataclass(frozen=True)
class MoveAction:
    """Move to a position."""
    x: float
    y: float
    z: float
    
    action_type = ActionType.MOVE
    
    def to_payload(self) -> Dict[str, Any]:
        """Convert the action to the data handed to the connection."""
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass(frozen=True)
class ShootAction(Generic[V]):
    """
    Shoot from a position.
    
    The velocity is opaque here; its shape is whatever the connection's
    protocol expects.
    """
    x: float
    y: float
    z: float
    velocity: V
    
    action_type = ActionType.SHOOT
    
    def to_payload(self) -> Dict[str, Any]:
        """
        Convert the action to the data handed to the connection.
        
        The velocity is attached as the same object, never copied.
        """
        return {"x": self.x, "y": self.y, "z": self.z, "velocity": self.velocity}


@dataclass(frozen=True)
class GenericAction(Generic[D]):
    """An arbitrary named action with caller-defined data."""
    action_type: str
    action_data: D
    
    def to_payload(self) -> D:
        return self.action_data
