"""
Unit tests for game_sdk.shared.logging_config module.
"""

import json
import logging
import logging.handlers

import pytest

from game_sdk.shared.config import SDKConfig
from game_sdk.shared.constants import LogLevel
from game_sdk.shared.logging_config import (
    ColoredFormatter,
    JsonFormatter,
    configure_from_config,
    configure_from_env,
    get_logger,
    setup_logging
)


def _make_record(msg="hello %s", args=("world",), level=logging.INFO, **extra):
    record = logging.LogRecord(
        name="game_sdk.test",
        level=level,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=args,
        exc_info=None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestColoredFormatter:
    """Test ColoredFormatter class."""
    
    def test_colors_defined_for_levels(self):
        for level in LogLevel:
            assert level.value in ColoredFormatter.COLORS
        assert 'RESET' in ColoredFormatter.COLORS
    
    def test_level_name_colored(self):
        formatter = ColoredFormatter("%(levelname)s %(message)s")
        
        output = formatter.format(_make_record())
        
        assert output.startswith(ColoredFormatter.COLORS['INFO'])
        assert output.endswith("hello world")
    
    def test_record_restored(self):
        formatter = ColoredFormatter("%(levelname)s")
        record = _make_record()
        
        formatter.format(record)
        
        assert record.levelname == "INFO"


class TestJsonFormatter:
    """Test JsonFormatter class."""
    
    def test_basic_fields(self):
        entry = json.loads(JsonFormatter().format(_make_record()))
        
        assert entry['level'] == "INFO"
        assert entry['logger'] == "game_sdk.test"
        assert entry['message'] == "hello world"
        assert entry['line'] == 10
    
    def test_extra_fields(self):
        entry = json.loads(JsonFormatter().format(_make_record(action_type="move")))
        
        assert entry['action_type'] == "move"
        assert 'args' not in entry
    
    def test_exception_info(self):
        try:
            raise ValueError("bad")
        except ValueError:
            import sys
            record = _make_record()
            record.exc_info = sys.exc_info()
        
        entry = json.loads(JsonFormatter().format(record))
        
        assert "ValueError: bad" in entry['exception']


class TestSetupLogging:
    """Test setup_logging function."""
    
    def test_configures_sdk_logger_by_default(self, clean_sdk_logger, clean_root_logger):
        root_handlers = clean_root_logger.handlers[:]
        root_level = clean_root_logger.level
        
        logger = setup_logging(level="WARNING")
        
        assert logger is clean_sdk_logger
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert clean_root_logger.handlers == root_handlers
        assert clean_root_logger.level == root_level
    
    def test_root_logger_when_requested(self, clean_root_logger):
        """Test configuring the root logger from a process entry point."""
        host_handler = logging.NullHandler()
        clean_root_logger.addHandler(host_handler)
        
        logger = setup_logging(level="ERROR", logger_name=None)
        
        assert logger is logging.getLogger()
        assert logger.level == logging.ERROR
        assert host_handler in logger.handlers
    
    def test_foreign_handlers_kept(self, clean_sdk_logger):
        """Test that handlers not installed by setup_logging are kept."""
        foreign_handler = logging.NullHandler()
        clean_sdk_logger.addHandler(foreign_handler)
        
        logger = setup_logging()
        
        assert foreign_handler in logger.handlers
        assert len(logger.handlers) == 2
    
    def test_reconfiguration_replaces_own_handlers(self, clean_sdk_logger):
        setup_logging()
        logger = setup_logging()
        
        assert len(logger.handlers) == 1
    
    def test_unknown_level_falls_back_to_info(self, clean_sdk_logger):
        logger = setup_logging(level="LOUD")
        
        assert logger.level == logging.INFO
    
    def test_lowercase_level(self, clean_sdk_logger):
        assert setup_logging(level="debug").level == logging.DEBUG
    
    def test_plain_formatter_without_colors(self, clean_sdk_logger):
        logger = setup_logging(enable_colors=False)
        
        formatter = logger.handlers[0].formatter
        assert type(formatter) is logging.Formatter
    
    def test_json_format(self, clean_sdk_logger):
        logger = setup_logging(json_format=True)
        
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)
    
    def test_with_file(self, clean_sdk_logger, tmp_path):
        log_file = tmp_path / "logs" / "sdk.log"
        
        logger = setup_logging(level="DEBUG", log_file=str(log_file), max_file_size=4096, backup_count=2)
        
        file_handlers = [h for h in logger.handlers
                         if isinstance(h, logging.handlers.RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 4096
        assert file_handlers[0].backupCount == 2
        
        get_logger("game_sdk.test").debug("written to file")
        file_handlers[0].flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")


class TestConfigureHelpers:
    """Test configure_from_config and configure_from_env."""
    
    def test_configure_from_config(self, clean_sdk_logger):
        logger = configure_from_config(SDKConfig(log_level="ERROR", log_json=True))
        
        assert logger is clean_sdk_logger
        assert logger.level == logging.ERROR
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)
    
    def test_configure_from_env(self, clean_sdk_logger, clean_env):
        clean_env.setenv("GAME_SDK_LOG_LEVEL", "DEBUG")
        
        logger = configure_from_env()
        
        assert logger.level == logging.DEBUG


class TestGetLogger:
    """Test get_logger function."""
    
    def test_named_logger(self):
        assert get_logger("game_sdk.client").name == "game_sdk.client"
    
    def test_default_name(self):
        assert get_logger().name == "game_sdk"
