"""
Configuration management for Palindromo
Handles paths and display settings
"""
from pathlib import Path
import os
import json
from typing import Optional

from .checker import MODES, UNICODE

DEFAULT_DISPLAY = {
    "heading": "Hola",
    "placeholder": "Escribe una palabra",
    "prompt": "¿Es un palíndromo?",
    "yes_label": "Si",
    "no_label": "No",
}

DISPLAY_KEYS = tuple(DEFAULT_DISPLAY) + ("normalization", "initial_result")


def parse_initial_result(value) -> Optional[bool]:
    """Coerce an initial_result setting (bool, None or true/false/none text)"""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "1"):
            return True
        if lowered in ("false", "no", "0"):
            return False
        if lowered in ("none", ""):
            return None
    raise ValueError(f"initial_result must be true, false or none, got {value!r}")


class Config:
    """Palindromo configuration"""

    def __init__(self, base_dir: str = None):
        """
        Initialize configuration

        Args:
            base_dir: Base directory for Palindromo data.
                     Defaults to ~/.palindromo
        """
        if base_dir is None:
            base_dir = Path.home() / ".palindromo"
        else:
            base_dir = Path(base_dir)

        self.base_dir = base_dir
        self.base_dir.mkdir(parents=True, exist_ok=True)

        self.logs_dir = self.base_dir / "logs"
        self.logs_dir.mkdir(exist_ok=True)

        self.settings_path = self.base_dir / "settings.json"

        # Problems found while loading settings, reported by the interfaces
        self.warnings = []

        self._load_display_config()

    def get_log_dir(self) -> Path:
        """Get logs directory"""
        return self.logs_dir

    def get_settings_path(self) -> Path:
        """Get settings file path"""
        return self.settings_path

    def _load_display_config(self):
        """Load display settings from the settings file, then environment variables"""
        # Initialize with defaults
        self.heading: str = DEFAULT_DISPLAY["heading"]
        self.placeholder: str = DEFAULT_DISPLAY["placeholder"]
        self.prompt: str = DEFAULT_DISPLAY["prompt"]
        self.yes_label: str = DEFAULT_DISPLAY["yes_label"]
        self.no_label: str = DEFAULT_DISPLAY["no_label"]
        self.normalization: str = UNICODE
        # The original widget shows "No" before anything is typed
        self.initial_result: Optional[bool] = False

        if self.settings_path.exists():
            data = self._read_settings_file()
            if data is None:
                # If settings file is invalid, just use the defaults
                self.warnings.append(f"Ignoring unreadable settings file: {self.settings_path}")
                data = {}

            for key in DEFAULT_DISPLAY:
                if key not in data:
                    continue
                if isinstance(data[key], str):
                    setattr(self, key, data[key])
                else:
                    self.warnings.append(f"Ignoring non-text value for '{key}': {data[key]!r}")

            if "normalization" in data:
                self.normalization = data["normalization"]

            if "initial_result" in data:
                try:
                    self.initial_result = parse_initial_result(data["initial_result"])
                except ValueError:
                    self.warnings.append(
                        f"Invalid initial_result {data['initial_result']!r}, using false"
                    )

        # Environment variables take precedence over the file
        self.normalization = os.environ.get("PALINDROMO_NORMALIZATION", self.normalization)
        self.yes_label = os.environ.get("PALINDROMO_YES_LABEL", self.yes_label)
        self.no_label = os.environ.get("PALINDROMO_NO_LABEL", self.no_label)

        self.normalization = str(self.normalization).lower()
        if self.normalization not in MODES:
            self.warnings.append(
                f"Unknown normalization mode '{self.normalization}', using '{UNICODE}'"
            )
            self.normalization = UNICODE

    def _read_settings_file(self) -> Optional[dict]:
        """Read settings.json; None if it is unreadable or not a JSON object"""
        try:
            with open(self.settings_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError, UnicodeDecodeError):
            return None
        return data if isinstance(data, dict) else None

    def get_display_config(self) -> dict:
        """Get current display settings"""
        return {
            "heading": self.heading,
            "placeholder": self.placeholder,
            "prompt": self.prompt,
            "yes_label": self.yes_label,
            "no_label": self.no_label,
            "normalization": self.normalization,
            "initial_result": self.initial_result,
        }

    def set_display_config(self, **changes):
        """
        Set and persist display settings

        Args:
            **changes: Any of heading, placeholder, prompt, yes_label,
                       no_label, normalization, initial_result

        Raises:
            ValueError: On an unknown key or an invalid value
        """
        unknown = [key for key in changes if key not in DISPLAY_KEYS]
        if unknown:
            raise ValueError(f"Unknown setting(s): {', '.join(unknown)}. Valid: {', '.join(DISPLAY_KEYS)}")

        if "normalization" in changes and changes["normalization"] not in MODES:
            raise ValueError(f"Invalid normalization: {changes['normalization']}. Valid: {', '.join(MODES)}")

        for key in DEFAULT_DISPLAY:
            if key in changes and not isinstance(changes[key], str):
                raise ValueError(f"{key} must be text, got {changes[key]!r}")

        if "initial_result" in changes:
            changes["initial_result"] = parse_initial_result(changes["initial_result"])

        stored = {}
        if self.settings_path.exists():
            stored = self._read_settings_file() or {}
        stored.update(changes)

        # Save to file
        with open(self.settings_path, "w", encoding="utf-8") as f:
            json.dump(stored, f, indent=2, ensure_ascii=False)

        # Update instance variables
        for key, value in changes.items():
            setattr(self, key, value)

    def result_label(self, result: Optional[bool]) -> str:
        """Label for a result; empty while nothing has been evaluated"""
        if result is None:
            return ""
        return self.yes_label if result else self.no_label

    def format_result(self, result: Optional[bool]) -> str:
        """Render a result the way the result line shows it"""
        return f"{self.prompt}: {self.result_label(result)}"
