"""
Tests for PalindromeEvaluator - the reactive wrapper
"""
from unittest.mock import Mock

import pytest

from palindromo.core.checker import ASCII
from palindromo.core.evaluator import PalindromeEvaluator


class TestInitialState:
    """Tests for the awaiting-first-evaluation state"""

    def test_defaults(self):
        evaluator = PalindromeEvaluator()

        assert evaluator.evaluated is False
        assert evaluator.result is None
        assert evaluator.text == ""

    def test_caller_chosen_initial_result(self):
        evaluator = PalindromeEvaluator(initial_result=False)

        assert evaluator.result is False
        assert evaluator.evaluated is False

    def test_invalid_mode_rejected_up_front(self):
        with pytest.raises(ValueError):
            PalindromeEvaluator(mode="rot13")


class TestOnInputChange:
    """Tests for synchronous re-evaluation and publishing"""

    def test_returns_and_stores_result(self):
        evaluator = PalindromeEvaluator()

        assert evaluator.on_input_change("Anita lava la tina") is True
        assert evaluator.evaluated is True
        assert evaluator.result is True
        assert evaluator.text == "Anita lava la tina"
        assert evaluator.normalized == "anitalavalatina"

    def test_race_then_racecar(self):
        """Results are published in input order with nothing skipped"""
        evaluator = PalindromeEvaluator()
        published = []
        evaluator.subscribe(published.append)

        evaluator.on_input_change("race")
        assert published == [False]

        evaluator.on_input_change("racecar")
        assert published == [False, True]

    def test_every_keystroke_published(self):
        evaluator = PalindromeEvaluator()
        published = []
        evaluator.subscribe(published.append)

        typed = ""
        for ch in "racecar":
            typed += ch
            evaluator.on_input_change(typed)

        assert published == [True, False, False, False, False, False, True]

    def test_listeners_called_in_subscription_order(self):
        evaluator = PalindromeEvaluator()
        calls = []
        evaluator.subscribe(lambda r: calls.append(("first", r)))
        evaluator.subscribe(lambda r: calls.append(("second", r)))

        evaluator.on_input_change("ab")

        assert calls == [("first", False), ("second", False)]

    def test_listener_sees_updated_state(self):
        """State is updated before listeners run"""
        evaluator = PalindromeEvaluator()
        seen = []
        evaluator.subscribe(lambda r: seen.append((evaluator.text, evaluator.result)))

        evaluator.on_input_change("aba")

        assert seen == [("aba", True)]

    def test_unsubscribe(self):
        evaluator = PalindromeEvaluator()
        listener = Mock()
        unsubscribe = evaluator.subscribe(listener)

        evaluator.on_input_change("a")
        unsubscribe()
        evaluator.on_input_change("ab")

        listener.assert_called_once_with(True)

    def test_unsubscribe_twice_is_harmless(self):
        evaluator = PalindromeEvaluator()
        unsubscribe = evaluator.subscribe(Mock())

        unsubscribe()
        unsubscribe()

    def test_same_input_same_result(self):
        evaluator = PalindromeEvaluator()

        first = evaluator.on_input_change("Hello, World!")
        second = evaluator.on_input_change("Hello, World!")

        assert first is second is False

    def test_empty_input_after_text(self):
        """Clearing the input is an ordinary change and evaluates to True"""
        evaluator = PalindromeEvaluator(initial_result=False)
        evaluator.on_input_change("ab")

        assert evaluator.on_input_change("") is True
        assert evaluator.evaluated is True

    def test_ascii_mode(self):
        evaluator = PalindromeEvaluator(mode=ASCII)

        assert evaluator.on_input_change("Ñandú") is False
        assert evaluator.normalized == "and"

    def test_logs_each_evaluation(self):
        logger = Mock()
        evaluator = PalindromeEvaluator(logger=logger)

        evaluator.on_input_change("Oso")

        logger.log_evaluation.assert_called_once_with("Oso", "oso", True)

    def test_listener_exception_propagates(self):
        evaluator = PalindromeEvaluator()
        evaluator.subscribe(Mock(side_effect=RuntimeError("boom")))

        with pytest.raises(RuntimeError, match="boom"):
            evaluator.on_input_change("a")

    def test_non_string_rejected(self):
        evaluator = PalindromeEvaluator()

        with pytest.raises(TypeError):
            evaluator.on_input_change(None)

        assert evaluator.evaluated is False
