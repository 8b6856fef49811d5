"""
Settings for deployer, loaded from an optional deployer.yaml.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validate

from deployer.exceptions import InvalidConfigError

logger = logging.getLogger(__name__)

SCHEMA_FILE = Path(__file__).parent / "schema" / "config.schema.json"
DEFAULT_CONFIG_NAME = "deployer.yaml"


@dataclass
class Settings:
    """Where the external tools live and where they run."""

    terraform_binary: str = "terraform"
    terraform_dir: Path = Path("terraform")
    ansible_binary: str = "ansible-playbook"

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "Settings":
        terraform = config.get("terraform", {})
        ansible = config.get("ansible", {})
        defaults = cls()
        return cls(
            terraform_binary=terraform.get("binary", defaults.terraform_binary),
            terraform_dir=Path(terraform.get("working_dir", defaults.terraform_dir)),
            ansible_binary=ansible.get("binary", defaults.ansible_binary),
        )


def load_settings(config_path: str | Path | None = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        config_path: Explicit config file. When None, deployer.yaml in the
            current directory is used if it exists.

    Returns:
        Settings, with defaults for anything the file leaves out

    Raises:
        InvalidConfigError: If an explicit file is missing, or the file is
            empty, malformed, or fails schema validation
    """
    if config_path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_NAME
        if not candidate.exists():
            logger.debug("No %s found, using default settings", DEFAULT_CONFIG_NAME)
            return Settings()
        config_path = candidate

    path = Path(config_path)
    if not path.is_file():
        raise InvalidConfigError(f"file not found: {path}")

    try:
        with open(path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"{path} is not valid YAML: {e}") from e

    if config is None:
        raise InvalidConfigError(f"{path} is empty")

    if not isinstance(config, dict):
        raise InvalidConfigError(f"expected a mapping, got {type(config).__name__}")

    _validate_config_schema(config)

    logger.debug("Loaded settings from %s", path)
    return Settings.from_dict(config)


def _validate_config_schema(config: dict) -> None:
    """Validate config against JSON schema."""
    schema = json.loads(SCHEMA_FILE.read_text())
    try:
        validate(instance=config, schema=schema)
    except ValidationError as e:
        location = ".".join(str(p) for p in e.path) or "<root>"
        raise InvalidConfigError(f"{e.message} (at {location})") from e
