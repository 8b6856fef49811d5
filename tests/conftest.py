"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path

import pytest
from rich.console import Console

from deployer.models.request import DeploymentRequest
from deployer.runner import ProcessRunner
from deployer.settings import Settings


class FakeRunner(ProcessRunner):
    """Records commands and answers with scripted exit codes."""

    def __init__(self, exit_codes: dict[str, int] | None = None):
        # Keyed by the terraform subcommand, e.g. "init", "workspace select"
        self.exit_codes = exit_codes or {}
        self.calls: list[tuple[list[str], Path]] = []

    def run(self, command: list[str], cwd: Path) -> int:
        self.calls.append((command, cwd))
        return self.exit_codes.get(self.key(command), 0)

    @staticmethod
    def key(command: list[str]) -> str:
        if command[1] == "workspace":
            return " ".join(command[1:3])
        return command[1]

    @property
    def commands(self) -> list[list[str]]:
        return [command for command, _ in self.calls]

    @property
    def keys(self) -> list[str]:
        return [self.key(command) for command in self.commands]


@pytest.fixture
def fake_runner():
    """Runner that succeeds for every command."""
    return FakeRunner()


@pytest.fixture
def quiet_console():
    """Console that writes nowhere visible."""
    return Console(quiet=True)


@pytest.fixture
def settings(tmp_path):
    """Settings pointing terraform at a temporary working directory."""
    tf_dir = tmp_path / "terraform"
    tf_dir.mkdir()
    return Settings(terraform_dir=tf_dir)


@pytest.fixture
def request_factory(tmp_path):
    """Build a valid DeploymentRequest with the state file under tmp_path."""

    def _make(**overrides):
        values = {
            "app_name": "shop",
            "vlan_tag": "20",
            "vm_ip": "192.168.20.50",
            "state_path": str(tmp_path / "state" / "terraform.tfstate"),
        }
        values.update(overrides)
        return DeploymentRequest(**values)

    return _make


@pytest.fixture
def make_runner():
    """Build a FakeRunner with scripted exit codes."""
    return FakeRunner
