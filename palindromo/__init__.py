"""Palindromo - live palindrome checker"""

__version__ = "0.1.0"
