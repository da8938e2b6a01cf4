"""
Stack output utilities.

Writes resolved stack outputs to a .env file so local tooling can reach the
deployed cluster and database without querying the Pulumi backend.
"""

import json
import re
from pathlib import Path
from typing import Any, Iterable

import pulumi


def to_env_key(key: str) -> str:
    """
    Convert an output name to an environment variable name.

    Args:
        key: Output name in camelCase or snake_case (e.g., 'clusterName')

    Returns:
        Upper snake case name (e.g., 'CLUSTER_NAME')
    """
    key = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", key)
    return re.sub(r"[^A-Za-z0-9]+", "_", key).strip("_").upper()


def format_env_lines(values: dict[str, Any]) -> str:
    """
    Render resolved output values as KEY=value lines.

    Args:
        values: Resolved output values keyed by output name

    Returns:
        .env file content, keys in insertion order
    """
    lines = []
    for key, value in values.items():
        if value is None:
            value = ""
        elif isinstance(value, (dict, list)):
            value = json.dumps(value)
        lines.append(f"{to_env_key(key)}={value}")
    return "\n".join(lines) + "\n"


def write_outputs_to_env(
    outputs: dict[str, pulumi.Input[Any]],
    filename: str,
    exclude: Iterable[str] = (),
) -> pulumi.Output[str]:
    """
    Write stack outputs to a .env file once they resolve.

    Args:
        outputs: Output values keyed by output name
        filename: Target file, relative to the working directory
        exclude: Output names to leave out (secrets such as kubeconfig)

    Returns:
        Output resolving to the written file path
    """
    excluded = set(exclude)
    selected = {k: v for k, v in outputs.items() if k not in excluded}

    def _write(values: dict[str, Any]) -> str:
        path = Path(filename)
        path.write_text(format_env_lines(values))
        pulumi.log.info(f"Wrote {len(values)} outputs to {path}")
        return str(path)

    return pulumi.Output.all(**selected).apply(_write)
