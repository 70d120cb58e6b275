"""Generator configuration and its YAML loader."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from protoschema.errors import ConfigError
from protoschema.schemas.resolver import DEFAULT_MAX_DEPTH
from protoschema.schemas.types import PLACEHOLDER_TYPE, NestingPolicy

DEFAULT_TABLE_NAME = "your_table_name"


class GeneratorConfig(BaseModel):
    """Settings shared by every dialect emitter.

    Command line flags override values loaded from a config file.
    """

    table_name: str = Field(default=DEFAULT_TABLE_NAME, description="Table name used in generated DDL")
    policy: NestingPolicy = Field(
        default=NestingPolicy.FLATTEN_INTO_PARENT,
        description="How message-typed fields are represented",
    )
    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=0,
        description="Maximum number of nested message levels to expand",
    )
    flatten_separator: str | None = Field(
        default=None,
        description="Joiner for flattened field names (dialect default if unset)",
    )
    placeholder_type: str = Field(
        default=PLACEHOLDER_TYPE,
        description="Type used for message fields that are not expanded",
    )

    def merged(self, **overrides: Any) -> "GeneratorConfig":
        """Return a copy with every non-None override applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return self
        return GeneratorConfig.model_validate({**self.model_dump(), **updates})


class ConfigLoader:
    """Loads generator configuration from YAML files."""

    def load_file(self, path: Path | str) -> GeneratorConfig:
        """Load a configuration from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Loaded GeneratorConfig

        Raises:
            ConfigError: If the file is missing or invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                content = f.read()
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        return self.load_from_string(content)

    def load_from_string(self, content: str) -> GeneratorConfig:
        """Load a configuration from a YAML string."""
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config: {e}") from e

        return self._parse_config(data or {})

    def _parse_config(self, data: Any) -> GeneratorConfig:
        if not isinstance(data, dict):
            raise ConfigError("Config must be a YAML mapping")

        try:
            return GeneratorConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config: {e}") from e

    def save_file(self, config: GeneratorConfig, path: Path | str) -> None:
        """Save a configuration to a YAML file.

        Args:
            config: The configuration to save
            path: Path for the output file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)


def load_config(path: Path | str) -> GeneratorConfig:
    """Convenience function to load a configuration from a file.

    Args:
        path: Path to the YAML file

    Returns:
        Loaded GeneratorConfig
    """
    loader = ConfigLoader()
    return loader.load_file(path)
