"""
Tests for TUI keybindings
"""
from unittest.mock import Mock

from prompt_toolkit.keys import Keys

from palindromo.interfaces.tui.keybindings import create_keybindings


def _binding_for(kb, key):
    return [b for b in kb.bindings if b.keys == (key,)]


def test_escape_is_not_eager():
    """Alt/Meta chords that start with escape still reach their own bindings"""
    kb = create_keybindings(Mock(), Mock())

    (binding,) = _binding_for(kb, Keys.Escape)

    assert not binding.eager()


def test_escape_clears_input():
    controller = Mock()
    input_field = Mock()
    kb = create_keybindings(controller, input_field)

    (binding,) = _binding_for(kb, Keys.Escape)
    binding.handler(Mock())

    controller.clear_input.assert_called_once_with(input_field.buffer)


def test_quit_keys_shut_down():
    controller = Mock()
    kb = create_keybindings(controller, Mock())
    event = Mock()

    for key in (Keys.ControlC, Keys.ControlQ):
        (binding,) = _binding_for(kb, key)
        binding.handler(event)

    assert controller.shutdown.call_count == 2
    assert event.app.exit.call_count == 2
