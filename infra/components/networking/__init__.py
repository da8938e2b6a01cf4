"""
Networking components for VPC infrastructure.

Components:
- NetworkComponent: VPC network, subnet, Cloud Router and Cloud NAT
- PrivateServiceAccessComponent: Service Networking peering for Cloud SQL
"""

from infra.components.networking.network import NetworkComponent, NetworkOutputs
from infra.components.networking.private_service_access import (
    PrivateServiceAccessComponent,
    PrivateServiceAccessOutputs,
)

__all__ = [
    "NetworkComponent",
    "NetworkOutputs",
    "PrivateServiceAccessComponent",
    "PrivateServiceAccessOutputs",
]
