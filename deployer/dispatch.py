"""
Routing of a validated request to its workflow.
"""

import logging

from rich.console import Console
from rich.markup import escape

from deployer.configure import ConfigurationWorkflow
from deployer.exceptions import UnknownActionError
from deployer.models.request import Action, DeploymentRequest
from deployer.provision import ProvisionWorkflow
from deployer.runner import ProcessRunner
from deployer.settings import Settings

logger = logging.getLogger(__name__)

WORKFLOWS = {
    Action.PROVISION: ProvisionWorkflow,
    Action.CONFIGURE: ConfigurationWorkflow,
}


def dispatch(
    request: DeploymentRequest,
    runner: ProcessRunner,
    settings: Settings | None = None,
    console: Console | None = None,
) -> None:
    """
    Run the workflow for the request's action.

    Args:
        request: Validated deployment request
        runner: Runner used for every external command
        settings: Tool locations, defaults when None
        console: Console for operator-facing output

    Raises:
        UnknownActionError: If the action has no workflow; nothing is run
    """
    console = console or Console()

    console.print(
        f"Running {escape(request.action)} for [bold]{escape(request.app_name)}[/bold]...",
        highlight=False,
    )

    try:
        action = Action(request.action)
    except ValueError:
        raise UnknownActionError(request.action) from None

    logger.debug("Dispatching %s to %s", action.value, WORKFLOWS[action].__name__)
    WORKFLOWS[action](request, runner, settings, console).run()
