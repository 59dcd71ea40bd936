"""
Unit tests for signer_client.shared.logging_config module.
"""

import json
import logging
import os
import sys
from unittest.mock import patch

from signer_client.shared.logging_config import (
    ColoredFormatter,
    JsonFormatter,
    LogLevel,
    configure_from_env,
    get_logger,
    setup_basic_logging,
    setup_logging,
)


def _record(msg="hello", level=logging.INFO, **extra):
    record = logging.LogRecord("signer_client.test", level, __file__, 10, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLogLevel:
    """Test LogLevel enum."""
    
    def test_values(self):
        """Test enum values match logging level names."""
        for level in LogLevel:
            assert isinstance(getattr(logging, level.value), int)


class TestColoredFormatter:
    """Test ColoredFormatter class."""
    
    def test_colored_formatter_colors(self):
        """Test that ColoredFormatter has expected colors."""
        formatter = ColoredFormatter()
        
        for name in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'RESET'):
            assert name in formatter.COLORS
    
    def test_levelname_restored(self):
        """Test that formatting does not leak color codes into the record."""
        formatter = ColoredFormatter("%(levelname)s %(message)s")
        record = _record()
        
        output = formatter.format(record)
        
        assert '\033[32m' in output
        assert record.levelname == "INFO"


class TestJsonFormatter:
    """Test JsonFormatter class."""
    
    def test_basic_fields(self):
        """Test that the output is JSON with the standard fields."""
        entry = json.loads(JsonFormatter().format(_record("dispatch")))
        
        assert entry['level'] == "INFO"
        assert entry['logger'] == "signer_client.test"
        assert entry['message'] == "dispatch"
    
    def test_extra_fields(self):
        """Test that extra attributes are included."""
        entry = json.loads(JsonFormatter().format(_record(command="sign", status_code=502)))
        
        assert entry['command'] == "sign"
        assert entry['status_code'] == 502
    
    def test_exception_info(self):
        """Test that exception info is formatted."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
        
        entry = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in entry['exception']


class TestSetupLogging:
    """Test setup_logging function."""
    
    def test_setup_logging_console_only(self):
        """Test setting up logging with console handler only."""
        setup_logging(level="DEBUG")
        
        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.DEBUG
    
    def test_setup_logging_with_file(self, temp_log_file):
        """Test setting up logging with file handler."""
        setup_logging(level="INFO", log_file=temp_log_file)
        
        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 2
        
        logging.getLogger("signer_client").info("written")
        for handler in root_logger.handlers:
            handler.flush()
        
        with open(temp_log_file, encoding='utf-8') as f:
            assert "written" in f.read()
    
    def test_setup_logging_creates_directory(self, tmp_path):
        """Test that a missing log directory is created."""
        log_file = tmp_path / "logs" / "signer.log"
        
        setup_logging(log_file=str(log_file))
        
        assert os.path.isdir(tmp_path / "logs")
    
    def test_setup_logging_json(self):
        """Test JSON console formatting."""
        setup_logging(json_format=True)
        
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, JsonFormatter)
    
    def test_invalid_level_defaults_to_info(self):
        """Test that an unknown level falls back to INFO."""
        setup_logging(level="LOUD")
        
        assert logging.getLogger().level == logging.INFO


class TestGetLogger:
    """Test get_logger function."""
    
    def test_named_logger(self):
        """Test getting a named logger."""
        assert get_logger("signer_client.client").name == "signer_client.client"
    
    def test_default_logger(self):
        """Test the package logger default."""
        assert get_logger().name == "signer_client"


class TestConfigureFromEnv:
    """Test environment based configuration."""
    
    @patch.dict('os.environ', {'SIGNER_LOG_LEVEL': 'WARNING', 'SIGNER_LOG_JSON': 'true'})
    def test_configure_from_env(self):
        """Test configuring logging from environment variables."""
        configure_from_env()
        
        root_logger = logging.getLogger()
        assert root_logger.level == logging.WARNING
        assert isinstance(root_logger.handlers[0].formatter, JsonFormatter)
    
    @patch.dict('os.environ', {'SIGNER_LOG_MAX_SIZE': 'big'})
    def test_setup_basic_logging_falls_back(self):
        """Test that malformed env values fall back to defaults."""
        logger = setup_basic_logging("signer_client.test")
        
        assert logger.name == "signer_client.test"
        assert logging.getLogger().level == logging.INFO
