"""
Application Deployment Component for the graphyy container.

Request Flow:
  Internet -> Service (LoadBalancer, port 80) -> pods labelled app=graphyy (targetPort)

Pods:
- Image pulled from GHCR with the registry credentials secret.
- PORT, AUTH_SECRET and POSTGRES_* environment variables point the app at the
  Cloud SQL private IP; values that resolve to nothing are passed as "".
"""

from dataclasses import dataclass
from typing import Any

import pulumi
import pulumi_kubernetes as k8s

from infra.configs.base import StackConfig
from infra.configs.constants import APP_LABELS, APP_NAME, PORTS


@dataclass
class AppDeploymentOutputs:
    """Output values from application deployment component."""
    deployment_name: pulumi.Output[str]
    deployment_uid: pulumi.Output[str]
    replicas: pulumi.Output[int]
    container_name: pulumi.Output[str]
    container_image: pulumi.Output[str]
    container_port: pulumi.Output[int]
    container_env: pulumi.Output[list[dict[str, Any]]]
    service_name: pulumi.Output[str]
    service_ip: pulumi.Output[str | None]


def _or_empty(value: pulumi.Input[str] | None) -> pulumi.Output[str]:
    return pulumi.Output.from_input(value).apply(lambda v: v or "")


def build_container_env(
    port: int,
    auth_secret: pulumi.Input[str],
    postgres_host: pulumi.Input[str],
    postgres_user: pulumi.Input[str],
    postgres_password: pulumi.Input[str],
    postgres_db: pulumi.Input[str],
) -> list[k8s.core.v1.EnvVarArgs]:
    """
    Build the application container environment.

    Args:
        port: Port the application listens on
        auth_secret: Secret used by the app to sign auth tokens
        postgres_host: Database host (Cloud SQL private IP)
        postgres_user: Database user
        postgres_password: Database password
        postgres_db: Database name

    Returns:
        Environment variables in container order
    """
    return [
        k8s.core.v1.EnvVarArgs(name="PORT", value=str(port)),
        k8s.core.v1.EnvVarArgs(name="AUTH_SECRET", value=_or_empty(auth_secret)),
        k8s.core.v1.EnvVarArgs(name="POSTGRES_HOST", value=_or_empty(postgres_host)),
        k8s.core.v1.EnvVarArgs(name="POSTGRES_USER", value=_or_empty(postgres_user)),
        k8s.core.v1.EnvVarArgs(name="POSTGRES_PASSWORD", value=_or_empty(postgres_password)),
        k8s.core.v1.EnvVarArgs(name="POSTGRES_DB", value=_or_empty(postgres_db)),
    ]


def _first_container(spec: Any) -> Any:
    return spec.template.spec.containers[0]


def _ingress_ip(status: Any) -> str | None:
    if not status or not status.load_balancer or not status.load_balancer.ingress:
        return None
    return status.load_balancer.ingress[0].ip


class AppDeploymentComponent(pulumi.ComponentResource):
    """
    Deployment and LoadBalancer Service for the application.
    """

    def __init__(
        self,
        name: str,
        config: StackConfig,
        postgres_host: pulumi.Input[str],
        postgres_user: pulumi.Input[str],
        postgres_password: pulumi.Input[str],
        postgres_db: pulumi.Input[str],
        image_pull_secret: pulumi.Input[str],
        provider: k8s.Provider,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:workloads:AppDeployment", name, None, opts)

        k8s_opts = pulumi.ResourceOptions(parent=self, provider=provider)

        env = build_container_env(
            port=config.target_port,
            auth_secret=config.auth_secret,
            postgres_host=postgres_host,
            postgres_user=postgres_user,
            postgres_password=postgres_password,
            postgres_db=postgres_db,
        )

        self.deployment = k8s.apps.v1.Deployment(
            f"{name}-deployment",
            spec=k8s.apps.v1.DeploymentSpecArgs(
                selector=k8s.meta.v1.LabelSelectorArgs(match_labels=APP_LABELS),
                replicas=config.app_replicas,
                template=k8s.core.v1.PodTemplateSpecArgs(
                    metadata=k8s.meta.v1.ObjectMetaArgs(labels=APP_LABELS),
                    spec=k8s.core.v1.PodSpecArgs(
                        containers=[
                            k8s.core.v1.ContainerArgs(
                                name=APP_NAME,
                                image=config.app_image,
                                ports=[
                                    k8s.core.v1.ContainerPortArgs(
                                        container_port=config.target_port,
                                    ),
                                ],
                                env=env,
                            ),
                        ],
                        image_pull_secrets=[
                            k8s.core.v1.LocalObjectReferenceArgs(name=image_pull_secret),
                        ],
                    ),
                ),
            ),
            opts=k8s_opts,
        )

        self.service = k8s.core.v1.Service(
            f"{name}-service",
            metadata=k8s.meta.v1.ObjectMetaArgs(labels=APP_LABELS),
            spec=k8s.core.v1.ServiceSpecArgs(
                type="LoadBalancer",
                ports=[
                    k8s.core.v1.ServicePortArgs(
                        port=PORTS["http"],
                        target_port=config.target_port,
                        protocol="TCP",
                    ),
                ],
                selector=APP_LABELS,
            ),
            opts=k8s_opts,
        )

        self.register_outputs({
            "deployment_name": self.deployment.metadata.name,
            "service_name": self.service.metadata.name,
        })

    def get_outputs(self) -> AppDeploymentOutputs:
        """Get application deployment output values."""
        container = self.deployment.spec.apply(_first_container)
        return AppDeploymentOutputs(
            deployment_name=self.deployment.metadata.name,
            deployment_uid=self.deployment.metadata.uid,
            replicas=self.deployment.spec.replicas,
            container_name=container.apply(lambda c: c.name),
            container_image=container.apply(lambda c: c.image),
            container_port=container.apply(lambda c: c.ports[0].container_port),
            container_env=pulumi.Output.secret(container.apply(
                lambda c: [{"name": e.name, "value": e.value} for e in c.env or []]
            )),
            service_name=self.service.metadata.name,
            service_ip=self.service.status.apply(_ingress_ip),
        )
