"""
GKE Cluster Component for the application workloads.

Cluster Layout:
1. Regional, VPC-native cluster in the custom network: nodes use the subnet range,
   pods get a /14 and services a /20 secondary range picked by GKE.
2. Private nodes: no external IPs on nodes, egress through Cloud NAT.
   The control plane keeps a public endpoint (master CIDR 10.100.0.0/28 for peering).
3. Default node pool removed right after creation; workers come from a separately
   managed node pool so node settings can change without recreating the cluster.
4. Dataplane V2 (ADVANCED_DATAPATH), NodeLocal DNSCache, Binary Authorization
   (project singleton policy), STABLE release channel, Workload Identity.

Node Identity:
- Nodes run as a dedicated service account instead of the Compute Engine default one.
- cloud-platform scope; actual permissions are whatever IAM grants that account.

Access:
- kubeconfig uses gke-gcloud-auth-plugin, so no static credentials end up in state.
"""

from dataclasses import dataclass

import pulumi
import pulumi_gcp as gcp

from infra.configs.base import StackConfig
from infra.configs.constants import (
    CLUSTER_IP_RANGES,
    MASTER_AUTHORIZED_NETWORKS,
    MASTER_CIDR,
    NODE_DEFAULTS,
    NODE_OAUTH_SCOPES,
)
from infra.utils.kubeconfig import kubeconfig_output
from infra.utils.labels import create_labels


@dataclass
class GkeClusterOutputs:
    """Output values from GKE cluster component."""
    cluster_id: pulumi.Output[str]
    cluster_name: pulumi.Output[str]
    cluster_endpoint: pulumi.Output[str]
    node_pool_name: pulumi.Output[str]
    node_service_account_email: pulumi.Output[str]
    kubeconfig: pulumi.Output[str]


class GkeClusterComponent(pulumi.ComponentResource):
    """
    Private GKE cluster with one managed node pool.
    """

    def __init__(
        self,
        name: str,
        config: StackConfig,
        network_name: pulumi.Input[str],
        subnet_name: pulumi.Input[str],
        node_service_account_id: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:GkeCluster", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        if config.is_production and any(
            block["cidr_block"] == "0.0.0.0/0" for block in MASTER_AUTHORIZED_NETWORKS
        ):
            pulumi.log.warn(
                "GKE control plane is reachable from all networks in a production stack",
                resource=self,
            )

        self.cluster = gcp.container.Cluster(
            f"{name}-gke-cluster",
            deletion_protection=config.deletion_protection,
            addons_config=gcp.container.ClusterAddonsConfigArgs(
                dns_cache_config=gcp.container.ClusterAddonsConfigDnsCacheConfigArgs(
                    enabled=True,
                ),
            ),
            binary_authorization=gcp.container.ClusterBinaryAuthorizationArgs(
                evaluation_mode="PROJECT_SINGLETON_POLICY_ENFORCE",
            ),
            datapath_provider="ADVANCED_DATAPATH",
            description="A GKE cluster",
            initial_node_count=1,
            ip_allocation_policy=gcp.container.ClusterIpAllocationPolicyArgs(
                cluster_ipv4_cidr_block=CLUSTER_IP_RANGES["pods"],
                services_ipv4_cidr_block=CLUSTER_IP_RANGES["services"],
            ),
            location=config.gcp_region,
            master_authorized_networks_config=gcp.container.ClusterMasterAuthorizedNetworksConfigArgs(
                cidr_blocks=[
                    gcp.container.ClusterMasterAuthorizedNetworksConfigCidrBlockArgs(
                        cidr_block=block["cidr_block"],
                        display_name=block["display_name"],
                    )
                    for block in MASTER_AUTHORIZED_NETWORKS
                ],
            ),
            network=network_name,
            networking_mode="VPC_NATIVE",
            private_cluster_config=gcp.container.ClusterPrivateClusterConfigArgs(
                enable_private_nodes=True,
                enable_private_endpoint=False,
                master_ipv4_cidr_block=MASTER_CIDR,
            ),
            remove_default_node_pool=True,
            release_channel=gcp.container.ClusterReleaseChannelArgs(
                channel="STABLE",
            ),
            resource_labels=create_labels(config.environment, f"{name}-gke-cluster"),
            subnetwork=subnet_name,
            workload_identity_config=gcp.container.ClusterWorkloadIdentityConfigArgs(
                workload_pool=config.workload_pool,
            ),
            opts=child_opts,
        )

        self._create_node_pool(name, config, node_service_account_id, child_opts)

        self.kubeconfig = kubeconfig_output(
            self.cluster.name,
            self.cluster.endpoint,
            self.cluster.master_auth.cluster_ca_certificate,
        )

        self.register_outputs({
            "cluster_id": self.cluster.id,
            "cluster_name": self.cluster.name,
            "cluster_endpoint": self.cluster.endpoint,
            "node_pool_name": self.node_pool.name,
            "node_service_account_email": self.node_service_account.email,
            "kubeconfig": self.kubeconfig,
        })

    def _create_node_pool(
        self,
        name: str,
        config: StackConfig,
        node_service_account_id: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create the node service account and the node pool."""
        self.node_service_account = gcp.serviceaccount.Account(
            f"{name}-gke-nodepool-sa",
            account_id=node_service_account_id,
            display_name="GKE Nodepool Service Account",
            opts=opts,
        )

        self.node_pool = gcp.container.NodePool(
            f"{name}-gke-nodepool",
            cluster=self.cluster.name,
            location=config.gcp_region,
            node_count=config.nodes_per_zone,
            management=gcp.container.NodePoolManagementArgs(
                auto_repair=True,
                auto_upgrade=True,
            ),
            node_config=gcp.container.NodePoolNodeConfigArgs(
                disk_size_gb=NODE_DEFAULTS["disk_size_gb"],
                disk_type=NODE_DEFAULTS["disk_type"],
                oauth_scopes=NODE_OAUTH_SCOPES,
                service_account=self.node_service_account.email,
                labels=create_labels(config.environment, f"{name}-gke-nodepool"),
            ),
            opts=opts,
        )

    def get_outputs(self) -> GkeClusterOutputs:
        """Get GKE cluster output values."""
        return GkeClusterOutputs(
            cluster_id=self.cluster.id,
            cluster_name=self.cluster.name,
            cluster_endpoint=self.cluster.endpoint,
            node_pool_name=self.node_pool.name,
            node_service_account_email=self.node_service_account.email,
            kubeconfig=self.kubeconfig,
        )
