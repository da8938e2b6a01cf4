"""
Pulumi infrastructure-as-code for the graphyy application.

This package defines Google Cloud infrastructure including:
- Custom-mode VPC with a subnet, Cloud Router and Cloud NAT
- GKE cluster with a dedicated node pool and node service account
- Private service access (VPC peering) for Cloud SQL
- Cloud SQL PostgreSQL instance, database and user
- Kubernetes Deployment and LoadBalancer Service for the application
"""
