"""
Stack configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from infra.configs.base import StackConfig
from infra.configs.constants import (
    DEFAULT_APP_IMAGE,
    DEFAULT_APP_REPLICAS,
    DEFAULT_AUTH_SECRET,
    DEFAULT_DB_NAME,
    DEFAULT_DB_TIER,
    DEFAULT_REGION,
    ENVIRONMENTS,
    PORTS,
)

# Cloud SQL for PostgreSQL identifier limit
MAX_DB_NAME_LENGTH = 63


def get_config() -> StackConfig:
    """
    Load stack configuration from Pulumi stack config.

    Returns:
        StackConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        pulumi.ConfigTypeError: If a numeric or boolean value does not parse
        pulumi.RunError: If a value is out of range
    """
    gcp_config = pulumi.Config("gcp")
    config = pulumi.Config()

    stack_config = StackConfig(
        gcp_project=gcp_config.require("project"),
        gcp_region=gcp_config.get("region") or DEFAULT_REGION,
        environment=config.get("environment") or "dev",
        db_user=config.require_secret("dbUser"),
        db_password=config.require_secret("dbPassword"),
        db_name=config.get("dbName") or DEFAULT_DB_NAME,
        db_tier=config.get("dbTier") or DEFAULT_DB_TIER,
        auth_secret=config.get_secret("authSecret") or DEFAULT_AUTH_SECRET,
        target_port=_get_int(config, "targetPort", PORTS["app"]),
        github_username=config.require("githubUsername"),
        github_password=config.require_secret("githubPassword"),
        github_email=config.require("githubEmail"),
        nodes_per_zone=_get_int(config, "nodesPerZone", 1),
        app_image=config.get("appImage") or DEFAULT_APP_IMAGE,
        app_replicas=_get_int(config, "appReplicas", DEFAULT_APP_REPLICAS),
        deletion_protection=config.get_bool("deletionProtection") or False,
        write_env_file=config.get_bool("writeEnvFile") or False,
    )

    validate_config(stack_config)
    return stack_config


def _get_int(config: pulumi.Config, key: str, default: int) -> int:
    # explicit 0 must reach validation
    value = config.get_int(key)
    return default if value is None else value


def validate_config(config: StackConfig) -> None:
    """
    Reject configuration values the cloud APIs would refuse later.

    Args:
        config: Loaded stack configuration

    Raises:
        pulumi.RunError: If any value is out of range
    """
    if config.environment not in ENVIRONMENTS:
        raise pulumi.RunError(
            f"environment must be one of {', '.join(ENVIRONMENTS)}, got '{config.environment}'"
        )

    if not 1 <= config.target_port <= 65535:
        raise pulumi.RunError(f"targetPort must be between 1 and 65535, got {config.target_port}")

    if config.nodes_per_zone < 1:
        raise pulumi.RunError(f"nodesPerZone must be at least 1, got {config.nodes_per_zone}")

    if config.app_replicas < 1:
        raise pulumi.RunError(f"appReplicas must be at least 1, got {config.app_replicas}")

    if not config.db_name:
        raise pulumi.RunError("dbName must not be empty")

    if len(config.db_name) > MAX_DB_NAME_LENGTH:
        raise pulumi.RunError(
            f"dbName must be at most {MAX_DB_NAME_LENGTH} characters, got {len(config.db_name)}"
        )
