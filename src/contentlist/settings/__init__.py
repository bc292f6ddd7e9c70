from .controller_config import ControllerConfig, Features
from .schema import CONFIG_SCHEMA, DEFAULT_CONFIG, merge_with_defaults, validate_config

__all__ = [
    "CONFIG_SCHEMA",
    "ControllerConfig",
    "DEFAULT_CONFIG",
    "Features",
    "merge_with_defaults",
    "validate_config",
]
