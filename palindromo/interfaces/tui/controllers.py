"""
TUI Controllers
Connects the input field to the palindrome evaluator
"""
from prompt_toolkit.application.current import get_app

from palindromo.core.config import Config
from palindromo.core.evaluator import PalindromeEvaluator
from palindromo.core.logger import PalindromoLogger

from .models import UIState


class TUIController:
    """Controller for TUI operations"""

    def __init__(self, state: UIState, config: Config, logger: PalindromoLogger):
        self.state = state
        self.config = config
        self.logger = logger

        self.evaluator = PalindromeEvaluator(
            mode=config.normalization,
            initial_result=config.initial_result,
            logger=logger,
        )
        self.evaluator.subscribe(self._publish)

        self.logger.log_session_started(config.normalization)

    # ----- internal helpers -----

    def _invalidate(self):
        """Request a UI redraw"""
        try:
            get_app().invalidate()
        except Exception:
            pass

    def _publish(self, result: bool):
        """Listener: copy the evaluator's current value into UI state"""
        self.state.text = self.evaluator.text
        self.state.result = result
        self.state.evaluated = True
        self.state.evaluations += 1
        self._invalidate()

    # ----- event handlers -----

    def attach(self, buffer):
        """Evaluate on every change of the given buffer"""
        buffer.on_text_changed += lambda buf: self.handle_text_changed(buf.text)

    def handle_text_changed(self, text: str) -> bool:
        """Evaluate the new input synchronously"""
        self.state.message = None
        return self.evaluator.on_input_change(text)

    def clear_input(self, buffer):
        """Empty the input field; the change event re-evaluates the empty text"""
        buffer.text = ""
        self.state.message = "Cleared"
        self._invalidate()

    def shutdown(self):
        """Record the end of the session"""
        self.logger.log_session_ended(self.state.evaluations)

