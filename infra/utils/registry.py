"""
Container registry credential helpers.

Builds the .dockerconfigjson payload stored in kubernetes.io/dockerconfigjson
secrets so kubelets can pull private images.
"""

import base64
import json

from infra.configs.constants import REGISTRY_SERVER


def build_docker_config_json(
    username: str,
    password: str,
    email: str,
    registry: str = REGISTRY_SERVER,
) -> str:
    """
    Serialize registry credentials in Docker config format.

    Args:
        username: Registry user
        password: Registry password or access token
        email: Registry user email
        registry: Registry host

    Returns:
        JSON document with a single entry under "auths"
    """
    auth = base64.b64encode(f"{username}:{password}".encode()).decode()
    return json.dumps({
        "auths": {
            registry: {
                "username": username,
                "password": password,
                "email": email,
                "auth": auth,
            },
        },
    })
