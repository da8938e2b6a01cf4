"""
Kubeconfig builder for GKE clusters.

Credentials are not embedded: kubectl and the Kubernetes provider call
gke-gcloud-auth-plugin, which exchanges the caller's gcloud credentials for
a short-lived token.
"""

import pulumi

AUTH_PLUGIN = "gke-gcloud-auth-plugin"
AUTH_PLUGIN_API_VERSION = "client.authentication.k8s.io/v1beta1"

_KUBECONFIG_TEMPLATE = """apiVersion: v1
clusters:
- cluster:
    certificate-authority-data: {ca_certificate}
    server: https://{endpoint}
  name: {name}
contexts:
- context:
    cluster: {name}
    user: {name}
  name: {name}
current-context: {name}
kind: Config
preferences: {{}}
users:
- name: {name}
  user:
    exec:
      apiVersion: {api_version}
      command: {plugin}
      installHint: Install {plugin} for use with kubectl by following
        https://cloud.google.com/blog/products/containers-kubernetes/kubectl-auth-changes-in-gke
      provideClusterInfo: true
"""


def build_kubeconfig(name: str, endpoint: str, ca_certificate: str) -> str:
    """
    Render a kubeconfig document for a single GKE cluster.

    Args:
        name: Cluster name, used for the cluster, context and user entries
        endpoint: Control plane IP or hostname (without scheme)
        ca_certificate: Base64-encoded cluster CA certificate

    Returns:
        Kubeconfig YAML
    """
    return _KUBECONFIG_TEMPLATE.format(
        name=name,
        endpoint=endpoint,
        ca_certificate=ca_certificate,
        api_version=AUTH_PLUGIN_API_VERSION,
        plugin=AUTH_PLUGIN,
    )


def kubeconfig_output(
    name: pulumi.Input[str],
    endpoint: pulumi.Input[str],
    ca_certificate: pulumi.Input[str],
) -> pulumi.Output[str]:
    """Build a secret kubeconfig once the cluster outputs resolve."""
    kubeconfig = pulumi.Output.all(name, endpoint, ca_certificate).apply(
        lambda args: build_kubeconfig(*args)
    )
    return pulumi.Output.secret(kubeconfig)
