"""
Resource naming conventions for consistent GCP resource names.

Follows pattern: {project}-{environment}-{resource}
"""

import re
from dataclasses import dataclass

# gcp.serviceaccount.Account account_id limits
ACCOUNT_ID_MIN_LENGTH = 6
ACCOUNT_ID_MAX_LENGTH = 30


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for GCP resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    @property
    def base(self) -> str:
        """Common prefix shared by every resource in the stack."""
        return f"{self.project}-{self.environment}"

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'network', 'gke-cluster')

        Returns:
            Formatted resource name
        """
        return f"{self.base}-{resource}"

    def account_id(self, resource: str) -> str:
        """
        Generate a service account ID.

        Account IDs must be 6-30 characters of lowercase letters, digits and
        hyphens, start with a letter and not end with a hyphen.

        Args:
            resource: Account identifier (e.g., 'np-sa')

        Returns:
            Valid service account ID
        """
        account_id = re.sub(r"[^a-z0-9-]", "-", self.name(resource).lower())
        account_id = re.sub(r"-{2,}", "-", account_id)
        account_id = account_id[:ACCOUNT_ID_MAX_LENGTH].strip("-")

        if not account_id or not account_id[0].isalpha():
            account_id = f"sa-{account_id}"[:ACCOUNT_ID_MAX_LENGTH].rstrip("-")

        if len(account_id) < ACCOUNT_ID_MIN_LENGTH:
            account_id = account_id.ljust(ACCOUNT_ID_MIN_LENGTH, "0")

        return account_id
