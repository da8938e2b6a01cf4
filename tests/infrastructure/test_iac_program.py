"""
End-to-end tests for the Pulumi program in infra/__main__.py.

The program runs under Pulumi mocks with stack config installed through
pulumi.runtime.set_all_config, so every layer registers its resources and
the env file writer runs against a temporary working directory.
"""

import runpy

import pulumi

EXPECTED_RESOURCE_TYPES = {
    "custom:networking:Network",
    "gcp:compute/network:Network",
    "gcp:compute/router:Router",
    "gcp:compute/routerNat:RouterNat",
    "gcp:compute/subnetwork:Subnetwork",
    "custom:compute:GkeCluster",
    "gcp:container/cluster:Cluster",
    "gcp:serviceaccount/account:Account",
    "gcp:container/nodePool:NodePool",
    "custom:networking:PrivateServiceAccess",
    "gcp:projects/service:Service",
    "gcp:compute/globalAddress:GlobalAddress",
    "gcp:servicenetworking/connection:Connection",
    "custom:storage:CloudSqlPostgres",
    "gcp:sql/databaseInstance:DatabaseInstance",
    "gcp:sql/database:Database",
    "gcp:sql/user:User",
    "pulumi:providers:kubernetes",
    "custom:workloads:RegistryCredentials",
    "kubernetes:core/v1:Secret",
    "custom:workloads:AppDeployment",
    "kubernetes:apps/v1:Deployment",
    "kubernetes:core/v1:Service",
}

ENV_FILE_KEYS = [
    "NETWORK_NAME",
    "NETWORK_ID",
    "CLUSTER_NAME",
    "CLUSTER_ID",
    "POSTGRES_INSTANCE_NAME",
    "POSTGRES_INSTANCE_CONNECTION_NAME",
    "POSTGRES_DATABASE_NAME",
    "ADD_SERVICE_NAME",
    "SERVICE_IP",
    "DOCKER_IMAGE_NAME",
    "DOCKER_IMAGE_ID",
    "DOCKER_IMAGE_REPLICAS",
    "DOCKER_IMAGE_CONTAINER_NAME",
    "DOCKER_IMAGE_CONTAINER_IMAGE",
    "DOCKER_IMAGE_CONTAINER_PORT",
]


def _run_program(infra_project_root):
    @pulumi.runtime.test
    def deploy():
        runpy.run_path(str(infra_project_root / "__main__.py"), run_name="__main__")
        return pulumi.Output.from_input(None)

    deploy()


def _read_env_file(path):
    entries = {}
    for line in path.read_text().splitlines():
        key, _, value = line.partition("=")
        entries[key] = value
    return entries


class TestStackProgram:
    """Run the whole program against mocks."""

    def test_registers_every_layer(
        self, pulumi_mocks, stack_settings, infra_project_root, tmp_path, monkeypatch
    ):
        """Every component and cloud resource should be registered."""
        monkeypatch.chdir(tmp_path)
        stack_settings()

        _run_program(infra_project_root)

        registered = {r.typ for r in pulumi_mocks.resources}
        missing = EXPECTED_RESOURCE_TYPES - registered
        assert not missing, f"Resources not registered: {sorted(missing)}"

    def test_kubernetes_resources_use_cluster_provider(
        self, pulumi_mocks, stack_settings, infra_project_root, tmp_path, monkeypatch
    ):
        """Workloads should be created through the provider built from the cluster."""
        monkeypatch.chdir(tmp_path)
        stack_settings()

        _run_program(infra_project_root)

        providers = pulumi_mocks.of_type("pulumi:providers:kubernetes")
        assert [p.name for p in providers] == ["graphyy-dev-k8s-provider"]

        workloads = [r for r in pulumi_mocks.resources if r.typ.startswith("kubernetes:")]
        assert len(workloads) == 3
        for resource in workloads:
            assert resource.provider is not None
            assert "::graphyy-dev-k8s-provider::" in resource.provider

    def test_env_file_skipped_by_default(
        self, pulumi_mocks, stack_settings, infra_project_root, tmp_path, monkeypatch
    ):
        """No env file should be written unless writeEnvFile is set."""
        monkeypatch.chdir(tmp_path)
        stack_settings()

        _run_program(infra_project_root)

        assert not (tmp_path / "infrastructure.env").exists()

    def test_env_file_leaves_out_secret_outputs(
        self, pulumi_mocks, stack_settings, infra_project_root, tmp_path, monkeypatch
    ):
        """writeEnvFile should write every non-secret output and no secrets."""
        monkeypatch.chdir(tmp_path)
        stack_settings({"graphyy:writeEnvFile": "true"})

        _run_program(infra_project_root)

        env_file = tmp_path / "infrastructure.env"
        assert env_file.exists()

        entries = _read_env_file(env_file)
        assert list(entries) == ENV_FILE_KEYS
        for secret_key in ["KUBECONFIG", "POSTGRES_USER_NAME", "DOCKER_IMAGE_CONTAINER_ENV"]:
            assert secret_key not in entries

        assert entries["POSTGRES_INSTANCE_CONNECTION_NAME"] == (
            "test:us-central1:graphyy-dev-postgres-instance"
        )
        assert entries["POSTGRES_DATABASE_NAME"] == "graphyy-development"
        assert entries["ADD_SERVICE_NAME"] == "graphyy-service"
        assert entries["DOCKER_IMAGE_REPLICAS"] == "3"
        assert entries["DOCKER_IMAGE_CONTAINER_PORT"] == "8080"
        assert entries["SERVICE_IP"] == ""
        assert "s3cret" not in env_file.read_text()
