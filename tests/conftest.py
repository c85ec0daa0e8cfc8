"""
Shared fixtures for Palindromo tests
"""
import pytest

from palindromo.core.config import Config
from palindromo.core.logger import PalindromoLogger
from palindromo.interfaces.tui.models import state_from_config
from palindromo.interfaces.tui.controllers import TUIController


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's PALINDROMO_* settings out of the tests"""
    for name in ("PALINDROMO_NORMALIZATION", "PALINDROMO_YES_LABEL", "PALINDROMO_NO_LABEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tmp_config(tmp_path):
    """Create a temporary config"""
    return Config(base_dir=str(tmp_path / "palindromo"))


@pytest.fixture
def controller(tmp_config):
    """
    Create a TUIController backed by a temporary config.

    Returns:
        tuple: (state, controller, config)
    """
    logger = PalindromoLogger(log_dir=str(tmp_config.get_log_dir()), console_output=False)
    state = state_from_config(tmp_config)
    ctl = TUIController(state, tmp_config, logger)
    return state, ctl, tmp_config
