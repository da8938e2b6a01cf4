"""
Infrastructure constants for graphyy.

Contains CIDR blocks, cluster and node defaults, database settings and
application defaults.
"""

from typing import Final

# Network configuration
SUBNET_CIDR: Final[str] = "10.128.0.0/12"
MASTER_CIDR: Final[str] = "10.100.0.0/28"

# Secondary ranges are sized by netmask, GKE picks the addresses
CLUSTER_IP_RANGES: Final[dict[str, str]] = {
    "pods": "/14",
    "services": "/20",
}

PEERING_PREFIX_LENGTH: Final[int] = 16

MASTER_AUTHORIZED_NETWORKS: Final[list[dict[str, str]]] = [
    {"cidr_block": "0.0.0.0/0", "display_name": "All networks"},
]

DEFAULT_REGION: Final[str] = "us-central1"

ENVIRONMENTS: Final[tuple[str, ...]] = ("dev", "staging", "prod")

# Node pool configuration
NODE_DEFAULTS: Final[dict[str, int | str]] = {
    "disk_size_gb": 200,
    "disk_type": "pd-standard",
}

NODE_OAUTH_SCOPES: Final[list[str]] = [
    "https://www.googleapis.com/auth/cloud-platform",
]

# Cloud SQL configuration
POSTGRES_VERSION: Final[str] = "POSTGRES_13"
DEFAULT_DB_TIER: Final[str] = "db-f1-micro"
DEFAULT_DB_NAME: Final[str] = "graphyy-development"

# Google APIs
SERVICE_NETWORKING_API: Final[str] = "servicenetworking.googleapis.com"

# Application defaults
APP_NAME: Final[str] = "graphyy"
APP_LABELS: Final[dict[str, str]] = {"app": APP_NAME}
DEFAULT_APP_IMAGE: Final[str] = "ghcr.io/dakaii/mandoo:latest"
DEFAULT_APP_REPLICAS: Final[int] = 3
DEFAULT_AUTH_SECRET: Final[str] = "authsecret"

REGISTRY_SERVER: Final[str] = "ghcr.io"
REGISTRY_SECRET_NAME: Final[str] = "ghcr-credentials"

PORTS: Final[dict[str, int]] = {
    "http": 80,
    "app": 8080,
}

# Default labels applied to resources that support them
DEFAULT_LABELS: Final[dict[str, str]] = {
    "project": APP_NAME,
    "managed-by": "pulumi",
}
