"""
CLI entry point for deployer.
"""

import logging
from functools import wraps
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from deployer.dispatch import dispatch
from deployer.exceptions import DeployerError, MissingAppNameError, format_error_for_cli
from deployer.models.request import DEFAULT_STATE_PATH, DeploymentRequest
from deployer.runner import get_runner
from deployer.settings import load_settings
from deployer.util.log import setup_logging
from deployer.validate import validate_request

app = typer.Typer(
    name="deployer",
    help="Validate VM deployment parameters, then run Terraform or Ansible",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def handle_errors(func):
    """Decorator to handle exceptions in CLI commands with nice formatting."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DeployerError as e:
            err_console.print(format_error_for_cli(e))
            raise typer.Exit(1)
        except Exception as e:
            err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
            logger.debug("Unexpected error", exc_info=True)
            raise typer.Exit(1)

    return wrapper


@app.command()
@handle_errors
def deploy(
    app_name: str = typer.Option("", "-app", "--app", help="Application name (required)"),
    action: str = typer.Option(
        "provision", "-action", "--action", help="Action to perform: provision, configure"
    ),
    vlan: str = typer.Option("20", "-vlan", "--vlan", help="VLAN tag: 10 (DMZ) or 20 (dev)"),
    ip: str = typer.Option("", "-ip", "--ip", help="Target IP address"),
    cpu: str = typer.Option("2", "-cpu", "--cpu", help="CPU cores"),
    ram: str = typer.Option("4096", "-ram", "--ram", help="RAM in MB"),
    disk: str = typer.Option("20G", "-disk", "--disk", help="Disk size"),
    ssh_key: str = typer.Option(
        "",
        "-ssh-key",
        "--ssh-key",
        help="SSH public key (default: terraform reads TF_VAR_ssh_public_key)",
    ),
    state_path: str = typer.Option(
        DEFAULT_STATE_PATH, "-state-path", "--state-path", help="Path to Terraform state file"
    ),
    config: Path | None = typer.Option(
        None,
        "-config",
        "--config",
        envvar="DEPLOYER_CONFIG",
        help="Settings file (default: ./deployer.yaml if present)",
    ),
    dry_run: bool = typer.Option(
        False, "-dry-run", "--dry-run", help="Print commands without running them"
    ),
    verbose: bool = typer.Option(False, "-verbose", "--verbose", "-v", help="Debug logging"),
):
    """Validate deployment parameters and run the requested action."""
    setup_logging(verbose)

    if not app_name:
        raise MissingAppNameError()

    request = DeploymentRequest(
        app_name=app_name,
        action=action,
        vlan_tag=vlan,
        vm_ip=ip,
        cpu_cores=cpu,
        ram_mb=ram,
        disk_gb=disk,
        ssh_public_key=ssh_key,
        state_path=state_path,
    )
    validate_request(request)

    settings = load_settings(config)
    runner = get_runner(dry_run, console)

    dispatch(request, runner, settings, console)

    suffix = " (dry run)" if dry_run else ""
    console.print(f"[green]✓ {action} finished for {escape(app_name)}{suffix}[/green]")


if __name__ == "__main__":
    app()
