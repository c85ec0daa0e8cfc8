"""
UI State Models
Dataclass for TUI state management
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class UIState:
    """Global UI state for the TUI"""
    text: str = ""
    result: Optional[bool] = None         # latest published result
    evaluated: bool = False               # False until the first keystroke
    evaluations: int = 0

    # Display strings (from Config)
    heading: str = ""
    placeholder: str = ""
    prompt: str = ""
    yes_label: str = ""
    no_label: str = ""

    # Meta
    message: Optional[str] = None         # transient status bar text

    def result_label(self) -> str:
        """Label for the current result, empty if there is none yet"""
        if self.result is None:
            return ""
        return self.yes_label if self.result else self.no_label


def state_from_config(config) -> UIState:
    """Build the initial UI state from a Config"""
    display = config.get_display_config()
    return UIState(
        result=display["initial_result"],
        heading=display["heading"],
        placeholder=display["placeholder"],
        prompt=display["prompt"],
        yes_label=display["yes_label"],
        no_label=display["no_label"],
    )
