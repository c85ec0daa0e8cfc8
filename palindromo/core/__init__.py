"""Core evaluation, configuration and logging"""
from .checker import normalize, is_palindrome
from .evaluator import PalindromeEvaluator

__all__ = ["normalize", "is_palindrome", "PalindromeEvaluator"]
