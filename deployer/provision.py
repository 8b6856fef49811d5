"""
Terraform provisioning workflow.

The workflow is a small state machine:

    INIT -> WORKSPACE_SELECT -> [WORKSPACE_CREATE] -> APPLY -> DONE

Each state runs at most one terraform command and returns the next state.
A non-zero exit from init, workspace creation or apply ends the run with an
ExecutionError. A failed workspace select only means the workspace has to be
created.
"""

import logging
from enum import Enum

from rich.console import Console
from rich.markup import escape

from deployer.exceptions import ExecutionError, StateDirectoryError
from deployer.models.request import DeploymentRequest
from deployer.runner import ProcessRunner
from deployer.settings import Settings
from deployer.util.files import ensure_dir

logger = logging.getLogger(__name__)


class ProvisionState(str, Enum):
    """States of the provisioning workflow."""

    INIT = "init"
    WORKSPACE_SELECT = "workspace_select"
    WORKSPACE_CREATE = "workspace_create"
    APPLY = "apply"
    DONE = "done"


class ProvisionWorkflow:
    """Runs terraform init, workspace select-or-create and apply for one app."""

    def __init__(
        self,
        request: DeploymentRequest,
        runner: ProcessRunner,
        settings: Settings | None = None,
        console: Console | None = None,
    ):
        self.request = request
        self.runner = runner
        self.settings = settings or Settings()
        self.console = console or Console()
        self._handlers = {
            ProvisionState.INIT: self._init,
            ProvisionState.WORKSPACE_SELECT: self._select_workspace,
            ProvisionState.WORKSPACE_CREATE: self._create_workspace,
            ProvisionState.APPLY: self._apply,
        }

    # Command builders

    def init_command(self) -> list[str]:
        return [
            self.settings.terraform_binary,
            "init",
            f"-backend-config=path={self.request.state_path}",
        ]

    def select_command(self) -> list[str]:
        return [self.settings.terraform_binary, "workspace", "select", self.request.app_name]

    def create_command(self) -> list[str]:
        return [self.settings.terraform_binary, "workspace", "new", self.request.app_name]

    def apply_command(self) -> list[str]:
        """Build the apply command; the SSH key var is only present when supplied."""
        command = [self.settings.terraform_binary, "apply", "-auto-approve"]
        command += [f"-var={name}={value}" for name, value in self.request.terraform_vars()]
        return command

    # State machine

    def run(self) -> list[ProvisionState]:
        """
        Drive the workflow from INIT to DONE.

        Returns:
            States visited, in order, ending with DONE

        Raises:
            StateDirectoryError: If the state directory cannot be created
            ExecutionError: If a fatal terraform step exits non-zero
        """
        state = ProvisionState.INIT
        visited = [state]
        while state is not ProvisionState.DONE:
            state = self.step(state)
            visited.append(state)
        return visited

    def step(self, state: ProvisionState) -> ProvisionState:
        """Execute a single state and return the one that follows it."""
        if state is ProvisionState.DONE:
            return state
        logger.debug("Provision state: %s", state.value)
        return self._handlers[state]()

    def _execute(self, command: list[str]) -> int:
        return self.runner.run(command, self.settings.terraform_dir)

    def _init(self) -> ProvisionState:
        state_dir = self.request.state_dir
        if self.runner.dry_run:
            logger.info("Dry run, not creating state directory %s", state_dir)
        else:
            try:
                ensure_dir(state_dir)
            except OSError as e:
                raise StateDirectoryError(str(state_dir), e.strerror or str(e)) from e

        self.console.print("[bold blue]Initializing Terraform...[/bold blue]")
        command = self.init_command()
        returncode = self._execute(command)
        if returncode != 0:
            raise ExecutionError("terraform init", command, returncode)
        return ProvisionState.WORKSPACE_SELECT

    def _select_workspace(self) -> ProvisionState:
        app_name = escape(self.request.app_name)
        self.console.print(f"[bold blue]Selecting workspace '{app_name}'...[/bold blue]")
        returncode = self._execute(self.select_command())
        if returncode == 0:
            return ProvisionState.APPLY

        # Any select failure is treated as a missing workspace
        logger.debug("workspace select exited with %d", returncode)
        self.console.print(f"[yellow]Workspace '{app_name}' not found, creating...[/yellow]")
        return ProvisionState.WORKSPACE_CREATE

    def _create_workspace(self) -> ProvisionState:
        command = self.create_command()
        returncode = self._execute(command)
        if returncode != 0:
            raise ExecutionError("terraform workspace new", command, returncode)
        return ProvisionState.APPLY

    def _apply(self) -> ProvisionState:
        self.console.print("[bold blue]Applying Terraform configuration...[/bold blue]")
        command = self.apply_command()
        returncode = self._execute(command)
        if returncode != 0:
            raise ExecutionError("terraform apply", command, returncode)
        return ProvisionState.DONE
