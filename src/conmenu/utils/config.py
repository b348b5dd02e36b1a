"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional

from conmenu.utils.constants import DEFAULT_ATTEMPTS, DEFAULT_PROMPT
from conmenu.utils.exceptions import ConfigurationError

ENV_PREFIX = "CONMENU_"


def get_conmenu_dir() -> Path:
    """Get the conmenu data directory (XDG-compliant)."""
    if env_dir := os.environ.get("CONMENU_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "conmenu"


def normalize_attempts(attempts: int) -> int:
    """Attempt budgets below one fall back to the default."""
    return attempts if attempts > 0 else DEFAULT_ATTEMPTS


class Config:
    """Application configuration."""

    # Settings that may be changed from the command line (attr_name -> description)
    SETTINGS: dict[str, str] = {
        "attempts": "Tries allowed for each typed read",
        "default_prompt": "Message shown above menu options",
        "debug": "Log to ~/.config/conmenu/debug.log",
        "error_log": "Record operation faults in error.log",
    }

    def __init__(self, conmenu_dir: Optional[Path] = None):
        """Load config from directory."""
        self.conmenu_dir = conmenu_dir or get_conmenu_dir()
        self._config_file = self.conmenu_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        # Set defaults
        self.attempts = DEFAULT_ATTEMPTS
        self.default_prompt = DEFAULT_PROMPT
        self.debug = False
        self.error_log = True
        # Env var overrides persisted in the config file
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
            except (json.JSONDecodeError, IOError):
                data = {}
            # A list or scalar at the top level is as good as no file
            if isinstance(data, dict):
                self.attempts = data.get("attempts", DEFAULT_ATTEMPTS)
                self.default_prompt = data.get("default_prompt", DEFAULT_PROMPT)
                self.debug = data.get("debug", False)
                self.error_log = data.get("error_log", True)
                env = data.get("env", {})
                self.env = env if isinstance(env, dict) else {}

        # Apply env section from config, then shell env vars override
        self._apply_env_overrides()

    @classmethod
    def setting_for(cls, key: str) -> Optional[str]:
        """Map an override key to its setting name, or None if it names none.

        Both CONMENU_FOO and FOO are accepted.
        """
        name = key[len(ENV_PREFIX) :] if key.startswith(ENV_PREFIX) else key
        name = name.lower()
        return name if name in cls.SETTINGS else None

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell CONMENU_* vars."""

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                attr_name = self.setting_for(key)
                if attr_name is None:
                    continue
                # Convert value based on current attribute type
                current = getattr(self, attr_name)
                if isinstance(current, bool):
                    setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
                elif isinstance(current, int):
                    try:
                        setattr(self, attr_name, int(value))
                    except ValueError:
                        pass
                else:
                    setattr(self, attr_name, value)

        # First apply config.env (persisted overrides)
        apply_env_dict(self.env)

        # Then apply shell env vars (highest priority)
        shell_env = {k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}
        apply_env_dict(shell_env)

        try:
            self.attempts = normalize_attempts(int(self.attempts))
        except (TypeError, ValueError):
            self.attempts = DEFAULT_ATTEMPTS

    def save(self):
        """Save config to file."""
        self.conmenu_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "attempts": self.attempts,
            "default_prompt": self.default_prompt,
            "debug": self.debug,
            "error_log": self.error_log,
            "env": self.env,
        }
        self._config_file.write_text(json.dumps(data, indent=2))

    def set_attempts(self, attempts: int):
        """Set the attempt budget and persist it. Values below one reset to 3."""
        self.attempts = normalize_attempts(attempts)
        self.save()

    def set_default_prompt(self, prompt: str):
        """Set the sticky menu prompt and persist it."""
        if not prompt or not prompt.strip():
            raise ConfigurationError("Default prompt cannot be empty")
        self.default_prompt = prompt.strip()
        self.save()

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self.save()

    def set_env(self, key: str, value: str):
        """Set an env var override in config."""
        self.env[key] = value
        self.save()
        # Re-apply to update attributes
        self._apply_env_overrides()

    def unset_env(self, key: str) -> bool:
        """Remove an env var override. Returns True if key existed."""
        if key in self.env:
            del self.env[key]
            self.save()
            return True
        return False

    def list_env(self) -> dict[str, str]:
        """List all env var overrides."""
        return self.env.copy()

    @property
    def debug_log_path(self) -> Path:
        """Path to the debug log."""
        return self.conmenu_dir / "debug.log"

    @property
    def error_log_path(self) -> Path:
        """Path to the operation fault log."""
        return self.conmenu_dir / "error.log"
