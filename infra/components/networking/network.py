"""
Network Component Resource for the GKE cluster.

Steps & Architecture:
1. Network: custom-mode VPC (no auto-created subnets), so every range is declared here.
2. Cloud Router: regional control plane for Cloud NAT.
3. Cloud NAT: gives private nodes outbound internet access (image pulls from GHCR)
   without external IPs. Addresses are allocated automatically and every subnet range is NATed.
4. Subnet (10.128.0.0/12): node range. Pod and service ranges are carved out by GKE
   (VPC-native cluster). Private Google Access lets nodes reach Google APIs without NAT.

Nodes have no public IPs: inbound traffic only arrives through the Service load balancer,
outbound traffic goes through NAT.
"""

from dataclasses import dataclass

import pulumi
import pulumi_gcp as gcp

from infra.configs.constants import SUBNET_CIDR


@dataclass
class NetworkOutputs:
    """Output values from network component."""
    network_id: pulumi.Output[str]
    network_name: pulumi.Output[str]
    network_self_link: pulumi.Output[str]
    subnet_name: pulumi.Output[str]
    router_name: pulumi.Output[str]
    nat_name: pulumi.Output[str]


class NetworkComponent(pulumi.ComponentResource):
    """
    VPC network with a node subnet and NAT egress.
    """

    def __init__(
        self,
        name: str,
        region: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:Network", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.network = gcp.compute.Network(
            f"{name}-network",
            auto_create_subnetworks=False,
            description="A virtual network for your GKE cluster(s)",
            opts=child_opts,
        )

        self._create_nat(name, region, child_opts)

        self.subnet = gcp.compute.Subnetwork(
            f"{name}-subnet",
            ip_cidr_range=SUBNET_CIDR,
            network=self.network.id,
            region=region,
            private_ip_google_access=True,
            opts=child_opts,
        )

        self.register_outputs({
            "network_id": self.network.id,
            "network_name": self.network.name,
            "network_self_link": self.network.self_link,
            "subnet_name": self.subnet.name,
            "router_name": self.router.name,
            "nat_name": self.nat.name,
        })

    def _create_nat(
        self,
        name: str,
        region: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create the Cloud Router and Cloud NAT gateway."""
        self.router = gcp.compute.Router(
            f"{name}-router",
            network=self.network.id,
            region=region,
            opts=opts,
        )

        self.nat = gcp.compute.RouterNat(
            f"{name}-nat-gateway",
            router=self.router.name,
            region=region,
            nat_ip_allocate_option="AUTO_ONLY",
            source_subnetwork_ip_ranges_to_nat="ALL_SUBNETWORKS_ALL_IP_RANGES",
            opts=opts,
        )

    def get_outputs(self) -> NetworkOutputs:
        """Get network output values."""
        return NetworkOutputs(
            network_id=self.network.id,
            network_name=self.network.name,
            network_self_link=self.network.self_link,
            subnet_name=self.subnet.name,
            router_name=self.router.name,
            nat_name=self.nat.name,
        )
