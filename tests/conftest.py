"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the test suite.
"""

import logging
from unittest.mock import AsyncMock

import pytest

from game_sdk.client import ActionFacade, ChatFacade
from game_sdk.shared.config import SDKConfig


@pytest.fixture
def mock_connection() -> AsyncMock:
    """Provide a connection whose send operations are awaitable mocks."""
    connection = AsyncMock()
    connection.send_chat_message = AsyncMock(return_value=None)
    connection.send_game_action = AsyncMock(return_value=None)
    return connection


@pytest.fixture
def chat_facade(mock_connection: AsyncMock) -> ChatFacade:
    """Provide a chat facade over the mock connection."""
    return ChatFacade(mock_connection)


@pytest.fixture
def action_facade(mock_connection: AsyncMock) -> ActionFacade:
    """Provide an action facade over the mock connection."""
    return ActionFacade(mock_connection)


@pytest.fixture
def sdk_config() -> SDKConfig:
    """Provide a test SDK configuration."""
    return SDKConfig(log_level="DEBUG", log_colors=False, trace_dispatch=True)


@pytest.fixture
def clean_root_logger():
    """Restore the root logger's handlers and level after a test."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove GAME_SDK_* variables from the environment."""
    import os
    for key in list(os.environ):
        if key.startswith("GAME_SDK_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def clean_sdk_logger():
    """Restore the game_sdk logger's handlers, level and propagation after a test."""
    sdk_logger = logging.getLogger("game_sdk")
    saved_handlers = sdk_logger.handlers[:]
    saved_level = sdk_logger.level
    saved_propagate = sdk_logger.propagate
    yield sdk_logger
    for handler in sdk_logger.handlers[:]:
        if handler not in saved_handlers:
            sdk_logger.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in sdk_logger.handlers:
            sdk_logger.addHandler(handler)
    sdk_logger.setLevel(saved_level)
    sdk_logger.propagate = saved_propagate
