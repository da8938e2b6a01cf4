"""
Pulumi program entry point for graphyy infrastructure.

Instantiates all component resources in dependency order:
1. Configuration
2. Network (subnet, router, NAT)
3. GKE cluster and node pool
4. Private service access → Cloud SQL PostgreSQL
5. Kubernetes provider → registry credentials → Deployment and Service
6. Stack exports
"""

import pulumi
import pulumi_kubernetes as k8s

from infra.configs.environment import get_config
from infra.configs.constants import APP_NAME
from infra.utils.naming import ResourceNamer
from infra.utils.outputs import write_outputs_to_env

# Networking
from infra.components.networking.network import NetworkComponent
from infra.components.networking.private_service_access import PrivateServiceAccessComponent

# Compute
from infra.components.compute.gke_cluster import GkeClusterComponent

# Storage
from infra.components.storage.cloud_sql import CloudSqlPostgresComponent

# Workloads
from infra.components.workloads.registry_credentials import RegistryCredentialsComponent
from infra.components.workloads.app_deployment import AppDeploymentComponent

# Secret outputs never written to the local env file
SECRET_OUTPUTS = ("kubeconfig", "postgresUserName", "dockerImageContainerEnv")


def main() -> None:
    """Deploy graphyy infrastructure."""
    # Load configuration
    config = get_config()
    namer = ResourceNamer(project=APP_NAME, environment=config.environment)
    base_name = namer.base

    pulumi.log.info(
        f"Deploying {base_name} to project {config.gcp_project} in {config.gcp_region}"
    )

    # --- Layer 1: Networking Foundation ---
    network = NetworkComponent(
        name=base_name,
        region=config.gcp_region,
    )
    network_outputs = network.get_outputs()

    # --- Layer 2: Cluster ---
    gke = GkeClusterComponent(
        name=base_name,
        config=config,
        network_name=network_outputs.network_name,
        subnet_name=network_outputs.subnet_name,
        node_service_account_id=namer.account_id("np-sa"),
    )
    gke_outputs = gke.get_outputs()

    # --- Layer 3: Private Service Access, Cloud SQL ---
    private_access = PrivateServiceAccessComponent(
        name=base_name,
        network_self_link=network_outputs.network_self_link,
    )
    private_access_outputs = private_access.get_outputs()

    database = CloudSqlPostgresComponent(
        name=base_name,
        config=config,
        private_network=private_access_outputs.connection_network,
        peering_connection=private_access.connection,
    )
    db_outputs = database.get_outputs()

    # --- Layer 4: Kubernetes Workloads ---
    k8s_provider = k8s.Provider(
        f"{base_name}-k8s-provider",
        kubeconfig=gke_outputs.kubeconfig,
        opts=pulumi.ResourceOptions(depends_on=[gke.node_pool]),
    )

    registry = RegistryCredentialsComponent(
        name=base_name,
        username=config.github_username,
        password=config.github_password,
        email=config.github_email,
        provider=k8s_provider,
    )
    registry_outputs = registry.get_outputs()

    app = AppDeploymentComponent(
        name=APP_NAME,
        config=config,
        postgres_host=db_outputs.private_ip_address,
        postgres_user=db_outputs.user_name,
        postgres_password=db_outputs.user_password,
        postgres_db=db_outputs.database_name,
        image_pull_secret=registry_outputs.secret_name,
        provider=k8s_provider,
    )
    app_outputs = app.get_outputs()

    # --- Exports ---
    outputs = {
        "networkName": network_outputs.network_name,
        "networkId": network_outputs.network_id,
        "clusterName": gke_outputs.cluster_name,
        "clusterId": gke_outputs.cluster_id,
        "kubeconfig": gke_outputs.kubeconfig,
        "postgresInstanceName": db_outputs.instance_name,
        "postgresInstanceConnectionName": db_outputs.connection_name,
        "postgresDatabaseName": db_outputs.database_name,
        "postgresUserName": db_outputs.user_name,
        "addServiceName": app_outputs.service_name,
        "serviceIp": app_outputs.service_ip,
        "dockerImageName": app_outputs.deployment_name,
        "dockerImageId": app_outputs.deployment_uid,
        "dockerImageReplicas": app_outputs.replicas,
        "dockerImageContainerName": app_outputs.container_name,
        "dockerImageContainerImage": app_outputs.container_image,
        "dockerImageContainerPort": app_outputs.container_port,
        "dockerImageContainerEnv": app_outputs.container_env,
    }

    # Write outputs to .env file for local development
    if config.write_env_file:
        write_outputs_to_env(outputs, "infrastructure.env", exclude=SECRET_OUTPUTS)

    # Export to Pulumi stack
    for key, value in outputs.items():
        pulumi.export(key, value)

    pulumi.log.info(f"✓ {base_name} program registered {len(outputs)} outputs")


# Execute
main()
