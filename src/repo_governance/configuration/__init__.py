"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, parse_run_configuration
from .runtime_settings import (
    BranchProtectionPolicy,
    ClientSettings,
    ProvisioningSettings,
    RunConfiguration,
)

__all__ = [
    "BranchProtectionPolicy",
    "ClientSettings",
    "ProvisioningSettings",
    "RunConfiguration",
    "ConfigurationError",
    "load_configuration",
    "parse_run_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
