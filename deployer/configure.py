"""
Ansible configuration workflow.

Not implemented yet: it reports that it ran and succeeds. It takes the same
request, runner and settings as ProvisionWorkflow so a playbook run can be
added without touching the dispatcher.
"""

import logging

from rich.console import Console
from rich.markup import escape

from deployer.models.request import DeploymentRequest
from deployer.runner import ProcessRunner
from deployer.settings import Settings

logger = logging.getLogger(__name__)


class ConfigurationWorkflow:
    """Configures a provisioned VM with Ansible."""

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

    def run(self) -> None:
        binary = escape(self.settings.ansible_binary)
        self.console.print(f"[bold blue]Running Ansible ({binary})...[/bold blue]")
        logger.debug(
            "Ansible configuration not implemented, %s not run for %s",
            self.settings.ansible_binary,
            self.request.app_name,
        )
