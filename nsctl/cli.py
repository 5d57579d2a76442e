import logging
import traceback
from typing import Optional, Sequence

import typer

from nsctl.config import Config, ResolveOptions, ScanOptions
from nsctl.exceptions import NsctlError
from nsctl.logging import setup_logging
from nsctl.models import ConnectionTarget
from nsctl.modules.connect import connect
from nsctl.modules.resolve import resolve
from nsctl.modules.scan import scan
from nsctl.providers import get_provider
from nsctl.registry import Registry, load_registry, save_registry

app = typer.Typer(add_completion=False)

logger = logging.getLogger("nsctl.cli")


def prompt_for_target(targets: Sequence[ConnectionTarget]) -> str:
    """List the candidate targets and read the user's choice."""
    typer.echo("Which cluster you want to use:")
    for i, target in enumerate(targets):
        typer.echo(f"{i}) cluster:\t{target.cluster}\tproject:\t{target.project}")
    return typer.prompt("Selection", default="", show_default=False, prompt_suffix="> ")


def run_scan(project: Optional[str]) -> None:
    """Scan all projects, or merge a single project into the existing registry."""
    options = ScanOptions(project=project)
    registry = load_registry() if project else Registry()

    typer.echo(f"🔎 Scanning {'project ' + project if project else 'all projects'}...")
    report = scan(registry, get_provider(), options)
    path = save_registry(registry)

    typer.echo(
        f"✅ Scanned {report.projects} projects, {report.clusters} clusters, "
        f"found {report.namespaces} namespaces ({len(registry)} unique)"
    )
    typer.echo(f"📄 Registry written to {path}")
    for failure in report.failures:
        typer.echo(f"⚠️  {failure.stage} {failure.subject}: {failure.message}", err=True)
    if not project and any(f.stage == "list projects" for f in report.failures):
        typer.echo(f"⚠️  Project listing failed, {path} now holds no namespaces. Re-run --scan once gcloud works.", err=True)


def list_namespaces() -> None:
    """Print every known namespace and its targets."""
    registry = load_registry()
    if not registry:
        typer.echo("No namespaces known yet, run with --scan first.")
        return
    for entry in registry:
        typer.echo(entry.name)
        for target in entry.targets:
            typer.echo(f"  - cluster: {target.cluster}\tproject: {target.project}\tregion: {target.region}")


def run_connect(name: str, cluster: Optional[str], project: Optional[str]) -> None:
    """Resolve ``name`` and switch the local tooling to it."""
    registry = load_registry()
    target = resolve(registry, name, ResolveOptions(cluster=cluster, project=project),
                     chooser=prompt_for_target)

    provider = get_provider()
    result = connect(provider, target, name)
    for step, message in result.errors:
        typer.echo(f"❌ Failed to switch {step}: {message}", err=True)
    if not result.ok:
        raise typer.Exit(code=1)

    typer.echo(
        f"You are now connected to:\n- namespace: {name}\n"
        f"- cluster: {target.cluster}\n- project: {target.project}"
    )
    context = provider.current_context()
    if context:
        typer.echo(f"- context: {context}")


@app.command()
def main(
    ctx: typer.Context,
    namespace_arg: Optional[str] = typer.Argument(None, metavar="NAMESPACE_NAME", help="Name of the namespace you want to connect to."),
    namespace: Optional[str] = typer.Option(None, "--namespace", "-n", help="Name of the namespace you want to connect to."),
    cluster: Optional[str] = typer.Option(None, "--cluster", "-c", help="Name of the cluster you want to connect to, required if given namespace exist in more than one cluster."),
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Name of the project you want to connect to, required if given namespace exist in more than one project or you want to run scan only against one project."),
    scan_flag: bool = typer.Option(False, "--scan", "-s", help="Scan all or only given project and store every existing namespace in the configuration file."),
    list_flag: bool = typer.Option(False, "--list", "-l", help="List namespaces stored in the configuration file."),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """Quickly connect to a namespace, wherever it lives."""
    setup_logging(debug)
    logger.debug(f"Registry file: {Config.registry_path()}")

    name = namespace_arg or namespace
    if not name and not scan_flag and not list_flag:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)

    try:
        if scan_flag:
            run_scan(project)
        elif list_flag:
            list_namespaces()
        else:
            run_connect(name, cluster, project)
    except NsctlError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=e.exit_code)
    except (typer.Exit, typer.Abort):
        raise
    except Exception as e:
        if debug:
            logger.error(f"Unhandled exception: {e}\n{traceback.format_exc()}")
        else:
            logger.error(f"Error: {e}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
