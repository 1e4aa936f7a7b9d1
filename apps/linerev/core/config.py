from __future__ import annotations

import os
from pathlib import Path
from typing import Any, List, Optional

import yaml
from dotenv import load_dotenv

from apps.linerev.models import Config

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigManager:
    """Load linerev configuration from env + YAML with the historical defaults."""

    def __init__(self, env_path: Optional[Path] = None, config_path: Optional[Path] = None):
        self.env_path = Path(env_path) if env_path else Path(".env")
        self.config_path = Path(config_path) if config_path else Path("linerev.yaml")
        self.config: Optional[Config] = None
        self.load_errors: List[str] = []

    def load(self) -> Config:
        """Load .env and YAML config into a Config dataclass."""
        self.load_errors = []
        load_dotenv(self.env_path, override=False)
        yaml_config = self._load_yaml(self.config_path)
        self.config = self._compose_config(yaml_config)
        return self.config

    def get(self, key: str, default: Any = None) -> Any:
        if self.config is None:
            self.load()
        return getattr(self.config, key, default)

    def validate(self) -> List[str]:
        """Validate current configuration and return error messages."""
        if self.config is None:
            self.load()
        return self.load_errors + self.config.validate()

    def _load_yaml(self, path: Path) -> dict:
        if not path.exists():
            return {}
        try:
            with path.open("r", encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            self.load_errors.append(f"Invalid YAML in {path}: {exc}")
            return {}
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            self.load_errors.append(f"{path}: top level must be a mapping, got {type(raw).__name__}")
            return {}
        return raw

    def _section(self, raw: dict, name: str) -> dict:
        section = raw.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            self.load_errors.append(f"{self.config_path}: '{name}' must be a mapping, got {type(section).__name__}")
            return {}
        return section

    def _to_bool(self, value: Any, default: bool) -> bool:
        if value is None:
            return default
        if isinstance(value, str):
            if not value.strip():
                return default
            return value.strip().lower() in _TRUTHY
        return bool(value)

    def _get_bool_env(self, var: str, default: bool) -> bool:
        return self._to_bool(os.getenv(var), default)

    def _compose_config(self, raw: dict) -> Config:
        defaults = Config()
        files_cfg = self._section(raw, "files")
        logging_cfg = self._section(raw, "logging")

        input_path = os.getenv("LINEREV_INPUT_PATH", files_cfg.get("input") or str(defaults.input_path))
        output_path = os.getenv("LINEREV_OUTPUT_PATH", files_cfg.get("output") or str(defaults.output_path))
        log_file = os.getenv("LINEREV_LOG_FILE", logging_cfg.get("file") or "")

        return Config(
            input_path=Path(input_path),
            output_path=Path(output_path),
            encoding=os.getenv("LINEREV_ENCODING", files_cfg.get("encoding") or defaults.encoding),
            errors=os.getenv("LINEREV_ERRORS", files_cfg.get("errors") or defaults.errors),
            strict=self._get_bool_env("LINEREV_STRICT", self._to_bool(raw.get("strict"), defaults.strict)),
            log_level=str(os.getenv("LINEREV_LOG_LEVEL", logging_cfg.get("level") or defaults.log_level)).upper(),
            log_file=Path(log_file) if log_file else None,
        )
