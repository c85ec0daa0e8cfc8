"""
Shared fixtures for CLI tests
"""
import pytest
from unittest.mock import patch
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Click test runner"""
    return CliRunner()


@pytest.fixture
def patched_config(tmp_config):
    """Make the CLI group use the temporary config instead of ~/.palindromo"""
    with patch("palindromo.interfaces.cli.Config", return_value=tmp_config):
        yield tmp_config
