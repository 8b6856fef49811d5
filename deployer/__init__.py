"""
deployer: VM deployment wrapper around Terraform and Ansible.

Validates that the target IP sits in the subnet of the requested VLAN, then
runs terraform init, selects or creates a per-application workspace and
applies the configuration. Configuration with Ansible is stubbed.
"""

__version__ = "0.1.0"
