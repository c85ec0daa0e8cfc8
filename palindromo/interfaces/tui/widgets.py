"""
TUI Widgets
prompt_toolkit UI components for Palindromo
"""
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout import Window
from prompt_toolkit.widgets import TextArea
from prompt_toolkit.filters import Condition
from prompt_toolkit.layout.processors import AfterInput, ConditionalProcessor
from .models import UIState


class HeadingControl(FormattedTextControl):
    """Control for the heading line"""

    def __init__(self, state: UIState):
        self.state = state
        super().__init__(self.get_text)

    def get_text(self):
        return [("class:heading", f" {self.state.heading}")]


class ResultControl(FormattedTextControl):
    """Control for the palindrome result line"""

    def __init__(self, state: UIState):
        self.state = state
        super().__init__(self.get_text)

    def get_text(self):
        """Generate formatted text for the result line"""
        label = self.state.result_label()
        if self.state.result is None:
            style = "class:dim"
        elif self.state.result:
            style = "class:success"
        else:
            style = "class:error"

        return [
            ("", f" {self.state.prompt}: "),
            (style, label),
        ]


class StatusBarControl(FormattedTextControl):
    """Control for the status bar"""

    def __init__(self, state: UIState):
        self.state = state
        super().__init__(self.get_text)

    def get_text(self):
        """Generate formatted text for status bar"""
        mode = "LIVE" if self.state.evaluated else "READY"
        hints = "type to check esc:clear ctrl-q:quit"
        msg = self.state.message or ""

        if msg:
            text = f" {mode} | {hints} | {msg[:40]}"
        else:
            text = f" {mode} | {hints}"

        return [("class:statusbar", text)]


def create_input_field(state: UIState) -> TextArea:
    """Create the single-line text field the user types into"""
    # Placeholder is rendered after the cursor while the field is empty
    placeholder = ConditionalProcessor(
        AfterInput(state.placeholder, style="class:placeholder"),
        filter=Condition(lambda: not state.text),
    )
    return TextArea(
        height=1,
        prompt="> ",
        multiline=False,
        wrap_lines=False,
        style="class:input",
        input_processors=[placeholder],
    )


def create_heading_window(state: UIState) -> Window:
    """Create the heading window"""
    return Window(
        HeadingControl(state),
        height=1,
        always_hide_cursor=True,
    )


def create_result_window(state: UIState) -> Window:
    """Create the result window"""
    return Window(
        ResultControl(state),
        height=1,
        always_hide_cursor=True,
    )


def create_status_bar(state: UIState) -> Window:
    """Create the status bar window"""
    return Window(
        StatusBarControl(state),
        height=1,
        style="class:statusbar",
        always_hide_cursor=True,
    )
