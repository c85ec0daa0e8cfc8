"""
Example usage of PalindromeEvaluator outside the TUI.

This demonstrates how any presentation layer can:
1. Check single strings with is_palindrome()
2. Drive an evaluator from a stream of input changes
3. Render each published result with the configured labels
"""

from palindromo.core import PalindromeEvaluator, is_palindrome, normalize
from palindromo.core.config import Config


def example_one_off_checks():
    """
    Example: Check a few phrases directly.
    """
    for phrase in ["Anita lava la tina", "palabra", "A man, a plan, a canal: Panama"]:
        print(f"{phrase!r} -> {normalize(phrase)!r}: {is_palindrome(phrase)}")


def example_live_updates():
    """
    Example: Feed the evaluator one keystroke at a time.

    Each change is evaluated and published before the next one is fed in,
    so the printed results follow the typing exactly.
    """
    config = Config()
    evaluator = PalindromeEvaluator(mode=config.normalization, initial_result=config.initial_result)
    evaluator.subscribe(lambda result: print(f"  {evaluator.text!r:12} {config.format_result(result)}"))

    print(f"  (before typing) {config.format_result(evaluator.result)}")

    typed = ""
    for ch in "racecar":
        typed += ch
        evaluator.on_input_change(typed)


if __name__ == "__main__":
    print("=" * 60)
    print("Palindromo Evaluator Examples")
    print("=" * 60)
    print()

    print("1. One-off checks:")
    example_one_off_checks()
    print()

    print("2. Live updates while typing 'racecar':")
    example_live_updates()
