"""prompt_toolkit interface for the live palindrome checker"""
