"""
Data models for deployer.
"""

from deployer.models.request import (
    DEFAULT_STATE_PATH,
    VLAN_LABELS,
    Action,
    DeploymentRequest,
)

__all__ = ["Action", "DeploymentRequest", "DEFAULT_STATE_PATH", "VLAN_LABELS"]
