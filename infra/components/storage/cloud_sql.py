"""
Cloud SQL PostgreSQL Component for Relational Database.

How the Connection Works:
1. Private IP: the instance joins our network through the Service Networking peering
   (PrivateServiceAccessComponent), so pods reach it on a private address.
2. Public IPv4 stays enabled with no authorized networks, which only admits the
   Cloud SQL Auth Proxy and connectors using IAM.
3. Credentials: user name and password come from secret stack config and are handed
   to the application Deployment as environment variables.

The instance is created only after the peering connection; Cloud SQL rejects a
private network that is not yet peered.
"""

from dataclasses import dataclass

import pulumi
import pulumi_gcp as gcp

from infra.configs.base import StackConfig
from infra.configs.constants import POSTGRES_VERSION
from infra.utils.labels import create_labels


@dataclass
class CloudSqlOutputs:
    """Output values from Cloud SQL component."""
    instance_name: pulumi.Output[str]
    connection_name: pulumi.Output[str]
    private_ip_address: pulumi.Output[str]
    database_name: pulumi.Output[str]
    user_name: pulumi.Output[str]
    user_password: pulumi.Output[str]


class CloudSqlPostgresComponent(pulumi.ComponentResource):
    """
    Cloud SQL PostgreSQL instance with the application database and user.
    """

    def __init__(
        self,
        name: str,
        config: StackConfig,
        private_network: pulumi.Input[str],
        peering_connection: pulumi.Resource,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:CloudSqlPostgres", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        if config.is_production and not config.deletion_protection:
            pulumi.log.warn(
                "Cloud SQL deletion protection is disabled in a production stack",
                resource=self,
            )

        self.instance = gcp.sql.DatabaseInstance(
            f"{name}-postgres-instance",
            database_version=POSTGRES_VERSION,
            deletion_protection=config.deletion_protection,
            settings=gcp.sql.DatabaseInstanceSettingsArgs(
                tier=config.db_tier,
                ip_configuration=gcp.sql.DatabaseInstanceSettingsIpConfigurationArgs(
                    ipv4_enabled=True,
                    private_network=private_network,
                    authorized_networks=[],
                ),
                user_labels=create_labels(config.environment, f"{name}-postgres-instance"),
            ),
            opts=pulumi.ResourceOptions(
                parent=self,
                depends_on=[peering_connection],
            ),
        )

        self.database = gcp.sql.Database(
            f"{name}-postgres-database",
            instance=self.instance.name,
            name=config.db_name,
            opts=child_opts,
        )

        self.user = gcp.sql.User(
            f"{name}-postgres-user",
            instance=self.instance.name,
            name=config.db_user,
            password=config.db_password,
            opts=child_opts,
        )

        self.register_outputs({
            "instance_name": self.instance.name,
            "connection_name": self.instance.connection_name,
            "private_ip_address": self.instance.private_ip_address,
            "database_name": self.database.name,
            "user_name": self.user.name,
        })

    def get_outputs(self) -> CloudSqlOutputs:
        """Get Cloud SQL output values."""
        return CloudSqlOutputs(
            instance_name=self.instance.name,
            connection_name=self.instance.connection_name,
            private_ip_address=self.instance.private_ip_address,
            database_name=self.database.name,
            user_name=self.user.name,
            user_password=pulumi.Output.secret(self.user.password),
        )
