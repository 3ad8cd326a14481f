"""Tests for the top-level argtoken package."""


class TestPackage:
    """Tests for importing the public API."""

    def test_import_package(self):
        """Test that the package imports and exposes parse and build."""
        import argtoken

        token = argtoken.parse("-v")
        assert token.type is argtoken.TokenType.OPTION
        assert token.abbreviated is True
        assert argtoken.build(token) == "-v"

    def test_logger_module_not_shadowed(self):
        """Test that argtoken.logger is the logging module."""
        import argtoken

        assert callable(argtoken.logger.setup_logger)
        assert callable(argtoken.logger.get_logger)
