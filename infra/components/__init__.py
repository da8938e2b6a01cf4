"""
Pulumi component resources for graphyy infrastructure.

Each submodule provides reusable ComponentResource classes:
- networking: VPC network, subnet, Cloud NAT, private service access
- compute: GKE cluster and node pool
- storage: Cloud SQL PostgreSQL
- workloads: Kubernetes registry credentials, Deployment and Service
"""
