"""
TUI Keybindings
Typing goes straight to the input field; only a few control keys are bound
"""
from prompt_toolkit.key_binding import KeyBindings


def create_keybindings(controller, input_field) -> KeyBindings:
    """Create keybindings for the TUI"""
    kb = KeyBindings()

    # Quit
    @kb.add('c-c')
    @kb.add('c-q')
    def _(event):
        """Quit the TUI"""
        controller.shutdown()
        event.app.exit()

    # Clear the field
    @kb.add('escape')
    def _(event):
        """Clear input"""
        controller.clear_input(input_field.buffer)

    return kb
