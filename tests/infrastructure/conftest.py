"""Pytest fixtures for infrastructure tests."""

from pathlib import Path

import pulumi
import pytest


class InfraMocks(pulumi.runtime.Mocks):
    """
    Pulumi mocks that record every registered resource.

    Resource state echoes the inputs plus the provider-computed attributes
    the components read back (names, endpoints, emails, addresses).
    """

    def __init__(self) -> None:
        super().__init__()
        self.resources = []

    def new_resource(self, args):
        self.resources.append(args)
        state = dict(args.inputs)
        state.setdefault("name", args.name)

        if args.typ == "gcp:compute/network:Network":
            state["selfLink"] = f"https://www.googleapis.com/compute/v1/projects/test/global/networks/{args.name}"
        elif args.typ == "gcp:compute/globalAddress:GlobalAddress":
            state["address"] = "10.20.0.0"
        elif args.typ == "gcp:container/cluster:Cluster":
            state["endpoint"] = "203.0.113.10"
            state["masterAuth"] = {"clusterCaCertificate": "Y2EtY2VydA=="}
        elif args.typ == "gcp:serviceaccount/account:Account":
            state["email"] = f"{args.inputs['accountId']}@test.iam.gserviceaccount.com"
        elif args.typ == "gcp:sql/databaseInstance:DatabaseInstance":
            state["connectionName"] = f"test:us-central1:{args.name}"
            state["privateIpAddress"] = "10.20.0.3"
        elif args.typ.startswith("kubernetes:"):
            metadata = dict(args.inputs.get("metadata") or {})
            metadata.setdefault("name", args.name)
            metadata.setdefault("uid", f"{args.name}-uid")
            state["metadata"] = metadata

        return [f"{args.name}_id", state]

    def call(self, args):
        return {}

    def of_type(self, typ: str) -> list:
        """Registered resources with the given type token."""
        return [r for r in self.resources if r.typ == typ]


@pytest.fixture
def infra_project_root():
    """Return the infra package directory."""
    return Path(__file__).parent.parent.parent / "infra"


@pytest.fixture
def python_files_in_infra(infra_project_root):
    """Return all Python files in the infra package."""
    return [f for f in infra_project_root.rglob("*.py") if "__pycache__" not in str(f)]


@pytest.fixture
def pulumi_mocks():
    """Install fresh Pulumi mocks for a single test."""
    mocks = InfraMocks()
    pulumi.runtime.set_mocks(mocks, project="graphyy", stack="dev", preview=False)
    return mocks


# Minimum stack config get_config() accepts, keyed as `pulumi config` stores it
REQUIRED_SETTINGS = {
    "gcp:project": "test-project",
    "graphyy:dbUser": "postgres",
    "graphyy:dbPassword": "s3cret",
    "graphyy:githubUsername": "octocat",
    "graphyy:githubPassword": "ghp_token",
    "graphyy:githubEmail": "octocat@example.com",
}

SECRET_SETTINGS = [
    "graphyy:dbUser",
    "graphyy:dbPassword",
    "graphyy:githubPassword",
    "graphyy:authSecret",
]


@pytest.fixture
def stack_settings(pulumi_mocks):
    """
    Return a function that installs stack config for the running program.

    The function takes overrides and keys to omit, and returns the values
    it set. Config is cleared again after the test.
    """

    def apply(overrides=None, omit=()):
        values = {**REQUIRED_SETTINGS, **(overrides or {})}
        for key in omit:
            values.pop(key)
        pulumi.runtime.set_all_config(
            values,
            secret_keys=[key for key in SECRET_SETTINGS if key in values],
        )
        return values

    yield apply
    pulumi.runtime.set_all_config({}, secret_keys=[])


@pytest.fixture
def stack_config():
    """Return a development stack configuration."""
    from infra.configs.base import StackConfig

    return StackConfig(
        gcp_project="test-project",
        gcp_region="us-central1",
        environment="dev",
        db_user="postgres",
        db_password="s3cret",
        db_name="graphyy-development",
        db_tier="db-f1-micro",
        auth_secret="authsecret",
        target_port=8080,
        github_username="octocat",
        github_password="ghp_token",
        github_email="octocat@example.com",
        nodes_per_zone=2,
        app_image="ghcr.io/dakaii/mandoo:latest",
        app_replicas=3,
    )
