"""Configuration loader with Pydantic validation for the USCC validator.

This module provides type-safe configuration loading from YAML files using
Pydantic models for validation and default values.
"""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field


class BatchConfig(BaseModel):
    """Batch validation configuration.

    Attributes:
        max_workers: Thread pool size for validate_batch
    """

    max_workers: int = Field(default=4, ge=1)


class LoggingConfig(BaseModel):
    """Rejection logging configuration.

    Attributes:
        log_rejections: Log every rejected code with its error code
        rejection_level: Log level used for rejections
    """

    log_rejections: bool = True
    rejection_level: Literal["debug", "info", "warning"] = "debug"


class OutputConfig(BaseModel):
    """Output configuration.

    Attributes:
        include_check_characters: Record expected/actual check characters in metrics
        include_normalized_code: Return the uppercased code on PASS
    """

    include_check_characters: bool = True
    include_normalized_code: bool = True


class ValidatorModuleConfig(BaseModel):
    """Complete validator configuration.

    Attributes:
        batch: Batch validation configuration
        logging: Rejection logging configuration
        output: Output formatting configuration
    """

    batch: BatchConfig = BatchConfig()
    logging: LoggingConfig = LoggingConfig()
    output: OutputConfig = OutputConfig()


class Config(BaseModel):
    """Root configuration container.

    Attributes:
        validator: Validator configuration
    """

    validator: ValidatorModuleConfig = ValidatorModuleConfig()


def load_config(config_path: Path) -> Config:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated Config object with all settings

    Raises:
        FileNotFoundError: If config file does not exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If configuration validation fails

    Example:
        >>> config = load_config(Path("uscc/config.yaml"))
        >>> print(config.validator.batch.max_workers)
        4
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    # Wrap flat YAML structure in 'validator' key for Config model
    return Config(validator=ValidatorModuleConfig(**config_dict))


def get_default_config() -> Config:
    """Get default configuration from bundled config.yaml file.

    Returns:
        Config object loaded from uscc/config.yaml
    """
    default_config_path = Path(__file__).parent / "config.yaml"
    if default_config_path.exists():
        return load_config(default_config_path)
    else:
        # Fallback to hardcoded defaults if config file is missing
        return Config()
