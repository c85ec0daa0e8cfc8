"""
Reactive palindrome evaluation
Re-evaluates on every input change and publishes the latest result
"""
from typing import Callable, List, Optional

from .checker import UNICODE, check, normalize

Listener = Callable[[bool], None]


class PalindromeEvaluator:
    """Holds the current input value and its palindrome result.

    Each call to on_input_change() evaluates synchronously and notifies
    every listener, in subscription order, before returning. Nothing but
    the current value is retained.
    """

    def __init__(
        self,
        mode: str = UNICODE,
        initial_result: Optional[bool] = None,
        logger=None,
    ):
        # Validate the mode up front instead of on the first keystroke
        normalize("", mode)

        self.mode = mode
        self.initial_result = initial_result
        self.logger = logger
        self._listeners: List[Listener] = []

        self.text: str = ""
        self.normalized: str = ""
        self.result: Optional[bool] = initial_result
        self.evaluated: bool = False

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it"""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def on_input_change(self, text: str) -> bool:
        """Evaluate the new input value and publish the result"""
        normalized, result = check(text, self.mode)

        self.text = text
        self.normalized = normalized
        self.result = result
        self.evaluated = True

        if self.logger:
            self.logger.log_evaluation(text, normalized, result)

        for listener in list(self._listeners):
            listener(result)

        return result

