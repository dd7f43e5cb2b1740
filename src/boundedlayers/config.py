"""Rule file management for boundedlayers using Pydantic models."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from boundedlayers.models.configuration import Configuration
from boundedlayers.models.expression import ExpressionKind

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".boundedlayers.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class RuleConfig(BaseModel):
    """A layer or component declaration."""
    name: str
    references: list[str] = Field(default_factory=list)
    references_anything: bool = Field(alias="referencesAnything", default=False)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v:
            raise ValueError("rule name must not be empty")
        return v

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class ExampleConfig(BaseModel):
    """Example references that must (or must not) be allowed."""
    name: str
    can_reference: list[str] = Field(alias="canReference", default_factory=list)
    cannot_reference: list[str] = Field(alias="cannotReference", default_factory=list)

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.INFO

    model_config = ConfigDict(use_enum_values=True)


class BoundedLayersConfig(BaseModel):
    """Complete rule file model."""
    expression_kind: ExpressionKind = Field(alias="expressionKind", default=ExpressionKind.NAME_SEGMENT)
    solution: str | None = None
    layers: list[RuleConfig] = Field(default_factory=list)
    components: list[RuleConfig] = Field(default_factory=list)
    examples: list[ExampleConfig] = Field(default_factory=list)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


def load_config(config_path: str | Path | None = None) -> BoundedLayersConfig:
    """Load a rule file.

    Args:
        config_path: Optional path to the rule file. If None, searches
                    current directory and parents for .boundedlayers.json

    Returns:
        BoundedLayersConfig: Loaded and validated configuration

    Raises:
        FileNotFoundError: If no rule file is specified or found
        ValueError: If the rule file is invalid
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            raise FileNotFoundError(f"No {CONFIG_FILE_NAME} found in current directory or its parents")
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {config_path}: {e}")

    try:
        config = BoundedLayersConfig(**config_data)
    except (TypeError, ValidationError) as e:
        raise ValueError(f"Invalid config in {config_path}: {e}")

    logger.debug(
        f"Loaded {len(config.layers)} layers, {len(config.components)} components "
        f"and {len(config.examples)} examples from {config_path}"
    )
    return config


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .boundedlayers.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def build_configuration(config: BoundedLayersConfig) -> Configuration:
    """Declare the rules of a rule file on a new ``Configuration``.

    Raises:
        ConfigurationError: If a pattern is invalid
    """
    configuration = Configuration(config.expression_kind)
    for declare, rules in ((configuration.layer, config.layers), (configuration.component, config.components)):
        for rule_config in rules:
            rule = declare(rule_config.name)
            rule.allow_references(*rule_config.references)
            if rule_config.references_anything:
                rule.allow_anything()
    return configuration


def check_examples(configuration: Configuration, config: BoundedLayersConfig) -> int:
    """Run every example of a rule file against ``configuration``.

    Returns:
        Number of examples checked

    Raises:
        ViolationError: For the first example that does not hold
    """
    for example in config.examples:
        # also reports an example name that has no layer or component
        configuration.for_example(example.name).can_reference(*example.can_reference)
        if example.cannot_reference:
            configuration.for_example(example.name).cannot_reference(*example.cannot_reference)
    return len(config.examples)


def rule_file_schema() -> dict[str, Any]:
    """JSON Schema describing the rule file, for editor completion and CI checks."""
    schema = BoundedLayersConfig.model_json_schema(by_alias=True)
    schema["$schema"] = "http://json-schema.org/draft-07/schema#"
    schema["title"] = "boundedlayers rule file"
    return schema
