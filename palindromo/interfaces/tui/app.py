"""
TUI Application
Main application factory
"""
from prompt_toolkit.application import Application
from prompt_toolkit.styles import Style

from palindromo.core.config import Config
from palindromo.core.logger import PalindromoLogger

from .models import state_from_config
from .layout import create_layout
from .widgets import create_input_field
from .keybindings import create_keybindings
from .controllers import TUIController


# Terminal color palette
STYLE = Style.from_dict({
    "statusbar": "fg:ansibrightblack",
    "separator": "fg:ansibrightblack",
    "dim": "fg:ansibrightblack",
    "heading": "bold underline",
    "placeholder": "fg:ansibrightblack italic",
    "success": "fg:ansigreen bold",
    "error": "fg:ansired bold",
})


def _build(config, logger, full_screen: bool):
    """Wire state, controller and widgets into an Application"""
    state = state_from_config(config)
    controller = TUIController(state, config, logger)

    input_field = create_input_field(state)
    controller.attach(input_field.buffer)

    layout = create_layout(state, input_field)
    key_bindings = create_keybindings(controller, input_field)

    app = Application(
        layout=layout,
        key_bindings=key_bindings,
        full_screen=full_screen,
        style=STYLE,
        mouse_support=False,
    )
    return app, state, controller, input_field


def create_app(config: Config = None) -> Application:
    """Create and configure the TUI application"""
    if config is None:
        config = Config()
    logger = PalindromoLogger(log_dir=str(config.get_log_dir()), console_output=False)

    app, *_ = _build(config, logger, full_screen=True)
    return app


def create_app_for_test(tmp_path, **settings):
    """
    Create an Application backed by a temporary config for integration testing.

    Args:
        tmp_path: Base directory for the temporary config and logs
        **settings: Display settings to persist before building the app

    Returns:
        (app, state, controller, input_field) tuple
    """
    config = Config(base_dir=str(tmp_path))
    if settings:
        config.set_display_config(**settings)
    logger = PalindromoLogger(log_dir=str(config.get_log_dir()), console_output=False)

    return _build(config, logger, full_screen=False)
