"""
Logging for Palindromo
Tracks evaluation sessions and individual evaluations
"""
import logging
from pathlib import Path
from datetime import datetime


class PalindromoLogger:
    """Structured logger for evaluation activity"""

    def __init__(self, log_dir: str = "logs", console_output: bool = True):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        # Set up Python logging
        self.logger = logging.getLogger("palindromo")
        self.logger.setLevel(logging.DEBUG)

        # Clear any existing handlers to prevent duplicates
        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers.clear()

        # Console handler (optional, disabled for TUI to prevent interference)
        if console_output:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.INFO)
            console_formatter = logging.Formatter(
                "[%(levelname)s] %(message)s"
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        # File handler (all logs)
        file_handler = logging.FileHandler(
            self.log_dir / f"palindromo_{datetime.now():%Y%m%d}.log",
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        file_handler.setFormatter(file_formatter)

        self.logger.addHandler(file_handler)

    def log_session_started(self, mode: str):
        """Log start of an interactive session"""
        self.logger.info(f"Session started (normalization: {mode})")

    def log_session_ended(self, evaluations: int):
        """Log end of an interactive session"""
        self.logger.info(f"Session ended after {evaluations} evaluations")

    def log_evaluation(self, text: str, normalized: str, result: bool):
        """Log a single evaluation"""
        self.logger.debug(f"Evaluated {text!r} -> {normalized!r}: {result}")

    def log_check(self, text: str, result: bool):
        """Log a one-off check from the command line"""
        verdict = "palindrome" if result else "not a palindrome"
        self.logger.info(f"Checked {text!r}: {verdict}")

    def info(self, message: str):
        """Generic info log"""
        self.logger.info(message)

    def debug(self, message: str):
        """Generic debug log"""
        self.logger.debug(message)

    def error(self, message: str):
        """Generic error log"""
        self.logger.error(message)

    def warning(self, message: str):
        """Generic warning log"""
        self.logger.warning(message)
