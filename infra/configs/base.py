"""
Base configuration dataclass for stack settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass

import pulumi


@dataclass(frozen=True)
class StackConfig:
    """
    Stack-specific configuration for infrastructure deployment.

    Attributes:
        gcp_project: Google Cloud project ID (gcp:project)
        gcp_region: Region for the cluster, router and NAT (gcp:region)
        environment: Deployment environment (dev, staging, prod)
        db_user: Cloud SQL user name (secret)
        db_password: Cloud SQL user password (secret)
        db_name: Cloud SQL database name
        db_tier: Cloud SQL machine tier
        auth_secret: Application auth secret (secret)
        target_port: Port the application container listens on
        github_username: GHCR pull user
        github_password: GHCR pull token (secret)
        github_email: GHCR pull user email
        nodes_per_zone: Node count per zone for the node pool
        app_image: Container image for the application
        app_replicas: Deployment replica count
        deletion_protection: Protect cluster and database from deletion
        write_env_file: Write resolved outputs to a local .env file
    """
    gcp_project: str
    gcp_region: str
    environment: str
    db_user: pulumi.Input[str]
    db_password: pulumi.Input[str]
    db_name: str
    db_tier: str
    auth_secret: pulumi.Input[str]
    target_port: int
    github_username: str
    github_password: pulumi.Input[str]
    github_email: str
    nodes_per_zone: int
    app_image: str
    app_replicas: int
    deletion_protection: bool = False
    write_env_file: bool = False

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    @property
    def workload_pool(self) -> str:
        """Workload Identity pool for the project."""
        return f"{self.gcp_project}.svc.id.goog"
