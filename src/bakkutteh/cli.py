"""bakkutteh CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from bakkutteh import __version__
from bakkutteh.config import ConfigError, ConfigValidationError, resolve_config
from bakkutteh.dispatch import Dispatcher, DispatchOptions
from bakkutteh.errors import DispatchError, UserCancelledError
from bakkutteh.k8s import K8sConnectionError, K8sError, get_k8s_client
from bakkutteh.output import console, print_error, print_info, print_success
from bakkutteh.prompt import ConsolePrompter

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="bakkutteh",
    help="Dispatch a manual Kubernetes job from a cronjob or deployment spec",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logs"),
    ] = False,
) -> None:
    """Dispatch a manual Kubernetes job from a cronjob or deployment spec."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"bakkutteh version {__version__}")


@app.command()
def dispatch(
    target_name: Annotated[
        str,
        typer.Option("--target-name", "-t", help="The name of the job that will be created"),
    ],
    job_name: Annotated[
        str | None,
        typer.Option(
            "--job-name",
            "-j",
            help="The cronjob (or deployment) used as the source of the job",
        ),
    ] = None,
    namespace: Annotated[
        str | None,
        typer.Option("--namespace", "-n", help="Namespace of the source and the job"),
    ] = None,
    backoff_limit: Annotated[
        int | None,
        typer.Option("--backoff-limit", "-b", help="Retries before the job is marked failed"),
    ] = None,
    dry_run: Annotated[
        bool | None,
        typer.Option("--dry-run/--no-dry-run", "-d", help="Submit with server-side dry run"),
    ] = None,
    dry_run_output_path: Annotated[
        Path | None,
        typer.Option(
            "--dry-run-output-path",
            help="Output path of the spec when --dry-run is used",
        ),
    ] = None,
    deployment: Annotated[
        bool | None,
        typer.Option(
            "--deployment/--cronjob",
            help="Use a deployment spec instead of a cronjob spec to create the job",
        ),
    ] = None,
    context: Annotated[
        str | None,
        typer.Option("--context", help="Kubernetes context (default: current)"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Defaults file (default: ./bakkutteh.yaml)"),
    ] = None,
) -> None:
    """Create a manual job from a cronjob or deployment.

    The job is named <target-name>-manual. Env values and resource limits
    can be changed before it is submitted.
    """
    try:
        cfg = resolve_config(
            config_file,
            namespace=namespace,
            backoff_limit=backoff_limit,
            dry_run=dry_run,
            dry_run_output_path=dry_run_output_path,
            deployment=deployment,
            context=context,
        )
    except ConfigValidationError as e:
        print_error("Config validation failed:")
        for err in e.errors:
            loc = ".".join(str(x) for x in err["loc"])
            console.print(f"  [red]*[/red] {loc}: {err['msg']}")
        raise typer.Exit(1)  # noqa: B904
    except ConfigError as e:
        print_error(f"Config error: {e}")
        raise typer.Exit(1)  # noqa: B904

    if cfg.dry_run_output_path is not None and not cfg.dry_run:
        print_info("--dry-run-output-path is ignored without --dry-run")

    try:
        k8s = get_k8s_client(context=cfg.context, namespace=cfg.namespace)
    except K8sConnectionError as e:
        print_error(f"Kubernetes connection failed: {e}")
        raise typer.Exit(1)  # noqa: B904

    options = DispatchOptions(
        target_name=target_name,
        source_name=job_name,
        deployment=cfg.deployment,
        backoff_limit=cfg.backoff_limit,
        dry_run=cfg.dry_run,
        dry_run_output_path=cfg.dry_run_output_path,
    )

    try:
        result = Dispatcher(k8s, ConsolePrompter()).run(options)
    except UserCancelledError:
        print_error("Operation cancelled")
        raise typer.Exit(1)  # noqa: B904
    except (DispatchError, K8sError) as e:
        logger.debug("Dispatch failed", exc_info=True)
        print_error(str(e))
        raise typer.Exit(1)  # noqa: B904

    if not result.dry_run:
        print_success(f"Job [bold cyan]{result.job_name}[/bold cyan] created")


if __name__ == "__main__":
    app()
