"""
Custom exceptions for deployer with helpful error messages.
"""

from rich.markup import escape


class DeployerError(Exception):
    """Base exception for deployer errors."""

    def __init__(self, message: str, suggestion: str = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.message)

    def __str__(self):
        if self.suggestion:
            return f"{self.message}\n\nSuggestion: {self.suggestion}"
        return self.message


class ValidationError(DeployerError):
    """Deployment parameters failed validation."""

    pass


class MissingAppNameError(ValidationError):
    """No application name was given."""

    def __init__(self):
        message = "App name is required"
        suggestion = "Pass the application name, e.g.:\n  deployer -app shop -ip 192.168.20.50"
        super().__init__(message, suggestion)


class InvalidVlanError(ValidationError):
    """VLAN tag is not one of the supported segments."""

    def __init__(self, vlan_tag: str):
        self.vlan_tag = vlan_tag
        message = (
            f"VLAN tag must be '10' (DMZ/production) or '20' (internal dev), got '{vlan_tag}'"
        )
        super().__init__(message)


class IpSubnetMismatchError(ValidationError):
    """Target IP is outside the subnet of its VLAN."""

    def __init__(self, ip: str, vlan_tag: str, vlan_label: str):
        self.ip = ip
        self.vlan_tag = vlan_tag
        message = (
            f"IP {ip} does not match 192.168.{vlan_tag}.x pattern "
            f"for VLAN {vlan_tag} ({vlan_label})"
        )
        suggestion = f"Use an address between 192.168.{vlan_tag}.10 and 192.168.{vlan_tag}.254"
        super().__init__(message, suggestion)


class InvalidOctetError(ValidationError):
    """Host octet of the target IP is outside the usable range."""

    def __init__(self, octet: int):
        self.octet = octet
        message = f"IP octet must be between 10 and 254, got {octet}"
        super().__init__(message)


class UnknownActionError(DeployerError):
    """Requested action has no workflow."""

    def __init__(self, action: str):
        self.action = action
        message = f"unknown action: {action}"
        suggestion = "Action must be one of:\n  - provision\n  - configure"
        super().__init__(message, suggestion)


class ExecutionError(DeployerError):
    """An external command exited with a non-zero status."""

    def __init__(self, step: str, command: list[str] = None, returncode: int = None):
        self.step = step
        self.command = command or []
        self.returncode = returncode

        message = f"{step} failed"
        if returncode is not None:
            message += f": exit status {returncode}"
        super().__init__(message)


class ToolNotFoundError(ExecutionError):
    """External executable is not installed or not on PATH."""

    def __init__(self, binary: str, command: list[str] = None):
        self.binary = binary
        super().__init__(binary, command)
        self.message = f"executable not found: {binary}"
        self.suggestion = (
            f"Install {binary} and make sure it is on your PATH,\n"
            "or set the full path as `binary` in deployer.yaml."
        )


class WorkingDirectoryNotFoundError(ExecutionError):
    """Directory the external tool should run in does not exist."""

    def __init__(self, path: str, command: list[str] = None):
        self.path = path
        super().__init__(command[0] if command else "command", command)
        self.message = f"working directory not found: {path}"
        self.suggestion = (
            "Run deployer from the directory that contains it, or set\n"
            "`working_dir` under `terraform` in deployer.yaml."
        )


class StateDirectoryError(ExecutionError):
    """Directory for the terraform state file could not be created."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__("state directory setup")
        self.message = f"failed to create state directory {path}: {reason}"
        self.suggestion = (
            "Check permissions on the parent directory or choose another location:\n"
            "  deployer -state-path ./state/terraform.tfstate ..."
        )


class ConfigurationError(DeployerError):
    """Configuration file errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Configuration file is invalid."""

    def __init__(self, error_details: str):
        message = f"Invalid configuration file: {error_details}"
        suggestion = (
            "Fix deployer.yaml or remove it to use the defaults.\n"
            "Supported keys:\n"
            "  terraform:\n"
            "    binary: terraform\n"
            "    working_dir: terraform\n"
            "  ansible:\n"
            "    binary: ansible-playbook"
        )
        super().__init__(message, suggestion)


def format_error_for_cli(error: Exception) -> str:
    """
    Format an exception for CLI display with helpful information.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, DeployerError):
        label = "Validation error:" if isinstance(error, ValidationError) else "Error:"
        output = f"[red]{label}[/red] {escape(error.message)}"
        if error.suggestion:
            output += f"\n\n[yellow]{error.suggestion}[/yellow]"
        return output
    else:
        return f"[red]Error:[/red] {escape(str(error))}"
