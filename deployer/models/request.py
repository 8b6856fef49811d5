"""Deployment request dataclass.

A request is built once from the command line and handed to the validator and
then to exactly one workflow. Values stay strings because they are passed
through verbatim as terraform variables.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DEFAULT_STATE_PATH = "/opt/terraform/terraform.tfstate"

VLAN_LABELS = {
    "10": "DMZ/production",
    "20": "internal dev",
}


class Action(str, Enum):
    """Workflows the dispatcher knows how to run."""

    PROVISION = "provision"
    CONFIGURE = "configure"


@dataclass
class DeploymentRequest:
    """Parameters for a single deployment run."""

    app_name: str
    action: str = Action.PROVISION.value
    vlan_tag: str = "20"
    vm_ip: str = ""
    cpu_cores: str = "2"
    ram_mb: str = "4096"
    disk_gb: str = "20G"
    ssh_public_key: str = ""
    state_path: str = DEFAULT_STATE_PATH

    @property
    def state_dir(self) -> Path:
        """Directory that holds the terraform state file."""
        return Path(self.state_path).parent

    def terraform_vars(self) -> list[tuple[str, str]]:
        """
        Variables passed to ``terraform apply``, in order.

        The SSH key is left out when empty so terraform can fall back to
        TF_VAR_ssh_public_key from its environment.
        """
        tf_vars = [
            ("app_name", self.app_name),
            ("vlan_tag", self.vlan_tag),
            ("vm_target_ip", self.vm_ip),
            ("vm_cpu_cores", self.cpu_cores),
            ("vm_ram_mb", self.ram_mb),
            ("vm_disk_gb", self.disk_gb),
        ]
        if self.ssh_public_key:
            tf_vars.append(("ssh_public_key", self.ssh_public_key))
        return tf_vars
