"""Configuration management for Puppy Bowl."""

import json
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)

DEFAULT_API_ROOT = "https://fsa-puppy-bowl.herokuapp.com/api"
DEFAULT_COHORT = "2410-ftb-et-web-am"


class Config(BaseModel):
    """Application configuration."""

    cohort_name: str = DEFAULT_COHORT
    api_root: str = DEFAULT_API_ROOT
    timeout_seconds: Optional[float] = None
    retry_attempts: int = 1

    @property
    def base_url(self) -> str:
        """Cohort-scoped API base URL."""
        return f"{self.api_root.rstrip('/')}/{self.cohort_name}"


class ConfigManager:
    """Manages application configuration persistence."""

    ENV_OVERRIDES = {
        "PUPPY_BOWL_COHORT": "cohort_name",
        "PUPPY_BOWL_API_ROOT": "api_root",
        "PUPPY_BOWL_TIMEOUT": "timeout_seconds",
        "PUPPY_BOWL_RETRY_ATTEMPTS": "retry_attempts",
    }

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or Path.home() / ".puppy_bowl"
        self.config_file = self.config_dir / "config.json"

    def _ensure_config_dir(self) -> None:
        """Ensure config directory exists."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def _read_file(self) -> dict:
        """Raw config file contents, or an empty dict if missing or invalid."""
        if not self.config_file.exists():
            return {}
        try:
            with open(self.config_file, 'r') as f:
                data = json.load(f)
            Config(**data)
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            console.print(f"[yellow]Warning: Invalid config file, using defaults: {escape(str(e))}[/yellow]")
            return {}
        return data

    def load_file_config(self) -> Config:
        """Load configuration from file only, without environment overrides."""
        return Config(**self._read_file())

    def load_config(self) -> Config:
        """Load configuration from file, then apply environment overrides."""
        data = self._read_file()

        load_dotenv()
        for env_name, field in self.ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if not value:
                continue
            try:
                Config(**{**data, field: value})
            except ValidationError as e:
                console.print(f"[yellow]Warning: Ignoring invalid {env_name}: {escape(str(e))}[/yellow]")
                continue
            data[field] = value

        return Config(**data)

    def save_config(self, config: Config) -> None:
        """Save configuration to file."""
        try:
            self._ensure_config_dir()
            with open(self.config_file, 'w') as f:
                json.dump(config.model_dump(), f, indent=2)
        except OSError as e:
            console.print(f"[yellow]Warning: Could not save config: {e}[/yellow]")

    def get_output_dir(self) -> Path:
        """Get output directory path."""
        output_dir = Path("out")
        output_dir.mkdir(exist_ok=True)
        return output_dir
