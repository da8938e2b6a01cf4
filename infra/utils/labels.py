"""
Label factory for GCP and Kubernetes resources.

Provides consistent labelling for cost allocation and resource management.
GCP labels allow only lowercase letters, digits, underscores and hyphens,
at most 63 characters, and keys must start with a letter.
"""

import re

from infra.configs.constants import DEFAULT_LABELS

MAX_LABEL_LENGTH = 63


def sanitize_label(value: str) -> str:
    """
    Coerce a string into a valid GCP label value.

    Args:
        value: Raw label value

    Returns:
        Lowercased value with invalid characters replaced by hyphens
    """
    cleaned = re.sub(r"[^a-z0-9_-]", "-", value.lower())
    return cleaned[:MAX_LABEL_LENGTH]


def sanitize_label_key(key: str) -> str:
    """
    Coerce a string into a valid GCP label key.

    Args:
        key: Raw label key

    Returns:
        Valid label key, prefixed with 'k' if it does not start with a letter
    """
    cleaned = sanitize_label(key)
    if not cleaned or not cleaned[0].isalpha():
        cleaned = f"k{cleaned}"[:MAX_LABEL_LENGTH]
    return cleaned


def create_labels(
    environment: str,
    resource_name: str,
    **extra_labels: str,
) -> dict[str, str]:
    """
    Create a standard label set for a GCP resource.

    Args:
        environment: Deployment environment
        resource_name: Name of the resource
        **extra_labels: Additional labels to include

    Returns:
        Dictionary of sanitized labels
    """
    labels = {
        **DEFAULT_LABELS,
        "environment": environment,
        "name": resource_name,
    }
    labels.update(extra_labels)
    return {sanitize_label_key(k): sanitize_label(v) for k, v in labels.items()}


def merge_labels(
    base_labels: dict[str, str],
    *additional_labels: dict[str, str],
) -> dict[str, str]:
    """
    Merge multiple label dictionaries.

    Args:
        base_labels: Base label dictionary
        *additional_labels: Additional label dictionaries to merge

    Returns:
        Merged label dictionary
    """
    result = base_labels.copy()
    for labels in additional_labels:
        result.update(labels)
    return result
