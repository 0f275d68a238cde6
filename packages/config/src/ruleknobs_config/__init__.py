"""RuleKnobs Config Package

Configuration loading and factory support shared by ruleknobs packages.
"""

from ruleknobs_common.exceptions import ConfigurationError

from .builders import FactoryBase
from .loader import load_config, substitute_env_vars

ConfigError = ConfigurationError

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "FactoryBase",
    "load_config",
    "substitute_env_vars",
]
