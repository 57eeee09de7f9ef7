"""
menugen — CLI entrypoint.

Usage:
    python -m menugen.main --help
    python -m menugen.main generate
    python -m menugen.main watch
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from menugen import __version__
from menugen.core.observability.logging_config import level_from_flags, setup_logging_from_env


@click.group()
@click.version_option(version=__version__, prog_name="menugen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to menugen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """menugen — generate script template menus for your project."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging_from_env(level_from_flags(debug=debug, verbose=verbose, quiet=quiet))


def _open_project(ctx: click.Context):
    """Load settings and build an indexed host, exiting on config errors."""
    from menugen.adapters.filesystem import FilesystemAssetHost
    from menugen.core.config.loader import (
        ConfigError,
        find_settings_file,
        load_settings,
        settings_root,
    )
    from menugen.core.use_cases.postprocess import AssetPostprocessor

    config_path: Path | None = ctx.obj.get("config_path")
    if config_path is None:
        config_path = find_settings_file()

    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    host = FilesystemAssetHost(settings_root(config_path), settings.assets_dir)
    host.refresh()
    host.take_pending()
    return AssetPostprocessor(host, settings)


def _echo_result(ctx: click.Context, result, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if not result.relevant:
        click.echo("Nothing to regenerate.")
        return

    if not ctx.obj.get("quiet"):
        if result.trigger:
            click.secho(f"\n⚡ Triggered by {result.trigger}", fg="cyan", bold=True)
        else:
            click.secho("\n⚡ Regenerated menus", fg="cyan", bold=True)

    for module in result.modules:
        click.secho(f"   ✓ {module.path}", fg="green", nl=False)
        click.echo(f"  ({len(module.entries)} template(s))")
        if ctx.obj.get("verbose"):
            for entry in module.entries:
                click.echo(f"     │ {entry.label} → {entry.new_name}")

    for path, error in result.failures.items():
        click.secho(f"   ✗ {path}", fg="red", nl=False)
        click.echo(f"  {error}")

    click.echo()


def _run(ctx: click.Context, as_json: bool, fn) -> None:
    from menugen.core.services.generators.menu_module import GenerationError
    from menugen.core.use_cases.postprocess import PassResult

    try:
        result = fn()
    except GenerationError as e:
        result = PassResult(
            relevant=True,
            modules=e.written,
            failures={path: str(err) for path, err in e.failures.items()},
        )
        _echo_result(ctx, result, as_json)
        sys.exit(1)

    _echo_result(ctx, result, as_json)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(ctx: click.Context, as_json: bool) -> None:
    """Regenerate the menu module of every config."""
    postprocessor = _open_project(ctx)
    _run(ctx, as_json, postprocessor.regenerate)


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def process(ctx: click.Context, paths: tuple[str, ...], as_json: bool) -> None:
    """Treat PATHS as imported assets and regenerate if any is relevant.

    Examples:

        menugen process Assets/Tools/Templates/Service.cs.txt
    """
    postprocessor = _open_project(ctx)
    _run(ctx, as_json, lambda: postprocessor.on_assets_changed(list(paths)))


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def roots(ctx: click.Context, as_json: bool) -> None:
    """List menu configs, their template roots and templates."""
    from menugen.core.use_cases.describe import describe_menus

    postprocessor = _open_project(ctx)
    reports = describe_menus(postprocessor.host, postprocessor.settings)

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in reports], indent=2))
        return

    if not reports:
        click.secho("No menu configs found.", fg="yellow")
        return

    click.echo()
    for report in reports:
        config = report.config
        if config is None:
            click.secho(f"   ✗ {report.config_path} ", fg="red", nl=False)
            click.echo("(cannot be loaded)")
            continue

        click.secho(f"   📋 {report.config_path}", fg="cyan", bold=True)
        click.echo(f"      Submenu: {config.submenu_label}")
        click.echo(f"      Prefix:  {config.new_file_prefix}")
        root_marker = "" if report.root_exists else "  (missing)"
        click.echo(f"      Root:    {report.template_root}{root_marker}")
        click.echo(f"      Output:  {report.output_path}")
        for template in report.templates:
            click.echo(f"        • {template.base_name}  → {template.path}")
    click.echo()


@cli.command()
@click.option("--interval", "-i", type=float, default=None, help="Seconds between polls.")
@click.pass_context
def watch(ctx: click.Context, interval: float | None) -> None:
    """Watch the asset folder and regenerate on relevant changes."""
    from menugen.core.services.watcher import watch as run_watch

    postprocessor = _open_project(ctx)
    poll = interval if interval is not None else postprocessor.settings.poll_interval

    click.secho("⚡ menugen watcher", bold=True)
    click.echo(f"   Project: {postprocessor.host.project_root}")
    click.echo(f"   Poll:    every {poll:.1f}s (Ctrl+C to stop)")

    try:
        run_watch(postprocessor, poll)
    except KeyboardInterrupt:
        click.echo("\nStopped.")


@cli.command("init-config")
@click.argument("folder")
@click.option("--name", default="ScriptTemplateMenu", help="Config file name (without extension).")
@click.option("--label", default=None, help="Submenu label.")
@click.option("--prefix", default=None, help="New file prefix.")
@click.pass_context
def init_config(
    ctx: click.Context,
    folder: str,
    name: str,
    label: str | None,
    prefix: str | None,
) -> None:
    """Write a new menu config into FOLDER (a store path)."""
    from menugen.core.config.loader import MENU_CONFIG_EXTENSION, dump_menu_config
    from menugen.core.models.menu_config import MenuConfig

    postprocessor = _open_project(ctx)
    host = postprocessor.host

    location = f"{folder.rstrip('/')}/{name}{MENU_CONFIG_EXTENSION}"
    target = host.to_disk(location)
    if target.exists():
        click.secho(f"❌ {location} already exists", fg="red")
        sys.exit(1)

    fields = {}
    if label is not None:
        fields["submenu_label"] = label
    if prefix is not None:
        fields["new_file_prefix"] = prefix
    config = MenuConfig(location=location, **fields)

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(dump_menu_config(config), encoding="utf-8")
    click.secho(f"✅ Created {location}", fg="green")


if __name__ == "__main__":
    cli()
