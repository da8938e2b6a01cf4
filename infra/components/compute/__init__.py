"""
Compute components for Kubernetes.

Components:
- GkeClusterComponent: Private GKE cluster, node service account and node pool
"""

from infra.components.compute.gke_cluster import GkeClusterComponent, GkeClusterOutputs

__all__ = [
    "GkeClusterComponent",
    "GkeClusterOutputs",
]
