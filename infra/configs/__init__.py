"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from infra.configs.base import StackConfig
from infra.configs.environment import get_config, validate_config
from infra.configs.constants import (
    SUBNET_CIDR,
    MASTER_CIDR,
    DEFAULT_LABELS,
    APP_LABELS,
)

__all__ = [
    "StackConfig",
    "get_config",
    "validate_config",
    "SUBNET_CIDR",
    "MASTER_CIDR",
    "DEFAULT_LABELS",
    "APP_LABELS",
]
