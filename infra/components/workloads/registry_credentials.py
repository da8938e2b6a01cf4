"""
Registry credentials component for private container images.

Creates a kubernetes.io/dockerconfigjson secret holding GHCR credentials.
Pods reference it through imagePullSecrets.
"""

from dataclasses import dataclass

import pulumi
import pulumi_kubernetes as k8s

from infra.configs.constants import REGISTRY_SECRET_NAME, REGISTRY_SERVER
from infra.utils.registry import build_docker_config_json


@dataclass
class RegistryCredentialsOutputs:
    """Output values from registry credentials component."""
    secret_name: pulumi.Output[str]


class RegistryCredentialsComponent(pulumi.ComponentResource):
    """
    Image pull secret for a private registry.
    """

    def __init__(
        self,
        name: str,
        username: pulumi.Input[str],
        password: pulumi.Input[str],
        email: pulumi.Input[str],
        provider: k8s.Provider,
        registry: str = REGISTRY_SERVER,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:workloads:RegistryCredentials", name, None, opts)

        docker_config = pulumi.Output.all(username, password, email).apply(
            lambda args: build_docker_config_json(*args, registry=registry)
        )

        self.secret = k8s.core.v1.Secret(
            f"{name}-registry-credentials",
            metadata=k8s.meta.v1.ObjectMetaArgs(
                name=REGISTRY_SECRET_NAME,
            ),
            type="kubernetes.io/dockerconfigjson",
            string_data={
                ".dockerconfigjson": pulumi.Output.secret(docker_config),
            },
            opts=pulumi.ResourceOptions(parent=self, provider=provider),
        )

        self.register_outputs({
            "secret_name": self.secret.metadata.name,
        })

    def get_outputs(self) -> RegistryCredentialsOutputs:
        """Get registry credentials output values."""
        return RegistryCredentialsOutputs(
            secret_name=self.secret.metadata.name,
        )
