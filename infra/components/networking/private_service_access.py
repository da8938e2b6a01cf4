"""
Private Service Access Component for Cloud SQL.

Cloud SQL private IPs live in a Google-managed producer network. Reaching them from
the cluster network needs:
1. The Service Networking API enabled on the project.
2. A reserved INTERNAL range (/16) on our network for the producer side.
3. A peering connection between our network and servicenetworking.googleapis.com
   that hands that range to the producer.

The connection must exist before any Cloud SQL instance asks for a private network,
so the database component takes an explicit dependency on it.
"""

from dataclasses import dataclass

import pulumi
import pulumi_gcp as gcp

from infra.configs.constants import PEERING_PREFIX_LENGTH, SERVICE_NETWORKING_API


@dataclass
class PrivateServiceAccessOutputs:
    """Output values from private service access component."""
    connection_network: pulumi.Output[str]
    peering_range_name: pulumi.Output[str]
    peering_range_address: pulumi.Output[str]


class PrivateServiceAccessComponent(pulumi.ComponentResource):
    """
    VPC peering to Google-managed services (Cloud SQL private IP).
    """

    def __init__(
        self,
        name: str,
        network_self_link: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:PrivateServiceAccess", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.service_networking_api = gcp.projects.Service(
            f"{name}-service-networking-api",
            service=SERVICE_NETWORKING_API,
            opts=child_opts,
        )

        self.peering_range = gcp.compute.GlobalAddress(
            f"{name}-vpc-peering-range",
            purpose="VPC_PEERING",
            address_type="INTERNAL",
            prefix_length=PEERING_PREFIX_LENGTH,
            network=network_self_link,
            opts=child_opts,
        )

        self.connection = gcp.servicenetworking.Connection(
            f"{name}-service-networking-connection",
            network=network_self_link,
            service=SERVICE_NETWORKING_API,
            reserved_peering_ranges=[self.peering_range.name],
            opts=pulumi.ResourceOptions(
                parent=self,
                depends_on=[self.service_networking_api],
            ),
        )

        self.register_outputs({
            "connection_network": self.connection.network,
            "peering_range_name": self.peering_range.name,
            "peering_range_address": self.peering_range.address,
        })

    def get_outputs(self) -> PrivateServiceAccessOutputs:
        """Get private service access output values."""
        return PrivateServiceAccessOutputs(
            connection_network=self.connection.network,
            peering_range_name=self.peering_range.name,
            peering_range_address=self.peering_range.address,
        )
