"""
Kubernetes workload components.

Components:
- RegistryCredentialsComponent: GHCR image pull secret
- AppDeploymentComponent: Application Deployment and LoadBalancer Service
"""

from infra.components.workloads.registry_credentials import (
    RegistryCredentialsComponent,
    RegistryCredentialsOutputs,
)
from infra.components.workloads.app_deployment import (
    AppDeploymentComponent,
    AppDeploymentOutputs,
    build_container_env,
)

__all__ = [
    "RegistryCredentialsComponent",
    "RegistryCredentialsOutputs",
    "AppDeploymentComponent",
    "AppDeploymentOutputs",
    "build_container_env",
]
