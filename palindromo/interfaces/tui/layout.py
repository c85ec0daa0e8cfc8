"""
TUI Layout
prompt_toolkit layout configuration
"""
from prompt_toolkit.layout import Layout, HSplit, Window
from .models import UIState
from .widgets import create_heading_window, create_result_window, create_status_bar


def create_root_container(state: UIState, input_field):
    """Create the root container: heading, input, result, then the status bar"""
    return HSplit([
        create_heading_window(state),
        Window(height=1, char='─', style='class:separator'),
        input_field,
        Window(height=1),
        create_result_window(state),
        # Filler pushes the status bar to the bottom
        Window(),
        create_status_bar(state),
    ])


def create_layout(state: UIState, input_field) -> Layout:
    """Create the prompt_toolkit Layout with the input field focused"""
    root = create_root_container(state, input_field)
    return Layout(root, focused_element=input_field)
