"""
Tests for logging configuration
"""

import logging

from reporting_api.logging_config import ROOT_LOGGER_NAME, get_module_logger, setup_logging


def _own_handlers(logger):
    return [h for h in logger.handlers if getattr(h, "_reporting_api", False)]


class TestModuleLoggers:
    """Test module logger naming"""

    def test_module_logger_is_child_of_package_logger(self):
        """Should namespace module loggers under the package logger"""
        package_logger = logging.getLogger(ROOT_LOGGER_NAME)
        logger = get_module_logger("request_builder")

        assert logger.name == "reporting_api.request_builder"
        assert logger.parent is package_logger

    def test_package_logger_has_null_handler(self):
        """Importing the package should not print anything by itself"""
        package_logger = logging.getLogger(ROOT_LOGGER_NAME)

        assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)


class TestSetupLogging:
    """Test handler setup"""

    def teardown_method(self):
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in _own_handlers(logger):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)

    def test_console_only(self):
        """Should attach a single INFO console handler"""
        logger = setup_logging(verbose=True)

        handlers = _own_handlers(logger)
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert handlers[0].level == logging.INFO

    def test_file_output(self, tmp_path):
        """Should write DEBUG records to the log file, creating its directory"""
        log_file = tmp_path / "logs" / "client.log"

        logger = setup_logging(log_file=log_file, verbose=False)
        get_module_logger("http_client").debug("GET http://example.com/")
        for handler in _own_handlers(logger):
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "reporting_api.http_client - DEBUG - GET http://example.com/" in content

    def test_level_filters_file_output(self, tmp_path):
        """Should drop records below the requested level"""
        log_file = tmp_path / "client.log"

        logger = setup_logging(log_file=log_file, verbose=False, level=logging.WARNING)
        get_module_logger("http_client").debug("GET http://example.com/")
        get_module_logger("config").warning("Config file missing")
        for handler in _own_handlers(logger):
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "GET http://example.com/" not in content
        assert "Config file missing" in content

    def test_repeated_setup_replaces_own_handlers_only(self):
        """Should not stack handlers, and should keep handlers added by the application"""
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        app_handler = logging.NullHandler()
        logger.addHandler(app_handler)
        try:
            setup_logging(verbose=True)
            setup_logging(verbose=True)

            assert len(_own_handlers(logger)) == 1
            assert app_handler in logger.handlers
        finally:
            logger.removeHandler(app_handler)
