"""Configuration management for VTO.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (VTO_*)
3. Config file (~/.vto/config.yaml)
4. Default values (lowest priority)

- EnvReader: Testable environment variable reading with DI support
- ConfigBuilder: Layered config construction with explicit precedence
- VTOConfigModel: Pydantic validation of merged values
- build_logging_config: Factory for merging CLI overrides with base config
"""

from vto.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from vto.config.env import EnvReader
from vto.config.loader import (
    get_config,
    get_default_config_path,
    load_config_file,
)
from vto.config.logging_factory import build_logging_config
from vto.config.models import LoggingConfig, VTOConfig
from vto.config.schema import (
    ConfigError,
    FFmpegConfigModel,
    LoggingConfigModel,
    VTOConfigModel,
)

__all__ = [
    # Models
    "LoggingConfig",
    "VTOConfig",
    # Validation
    "ConfigError",
    "FFmpegConfigModel",
    "LoggingConfigModel",
    "VTOConfigModel",
    # Loader
    "get_config",
    "get_default_config_path",
    "load_config_file",
    # Layering
    "EnvReader",
    "ConfigBuilder",
    "ConfigSource",
    "source_from_env",
    "source_from_file",
    "build_logging_config",
]
