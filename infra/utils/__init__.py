"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, label factories, kubeconfig and registry
credential builders, and output utilities.
"""

from infra.utils.naming import ResourceNamer
from infra.utils.labels import create_labels, merge_labels, sanitize_label
from infra.utils.kubeconfig import build_kubeconfig, kubeconfig_output
from infra.utils.registry import build_docker_config_json
from infra.utils.outputs import write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "create_labels",
    "merge_labels",
    "sanitize_label",
    "build_kubeconfig",
    "kubeconfig_output",
    "build_docker_config_json",
    "write_outputs_to_env",
]
