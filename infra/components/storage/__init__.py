"""
Storage components for Cloud SQL.

Components:
- CloudSqlPostgresComponent: Cloud SQL PostgreSQL instance, database and user
"""

from infra.components.storage.cloud_sql import CloudSqlPostgresComponent, CloudSqlOutputs

__all__ = [
    "CloudSqlPostgresComponent",
    "CloudSqlOutputs",
]
