"""
ai-switch — CLI entrypoint.

Usage:
    ai --help
    ai codex                      # same as: ai use codex
    ai use claude -- --model opus
    ai yolo gemini
    ai --dry-run use codex
    ai doctor
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

import click

from ai_switch import __version__
from ai_switch.core.observability.logging_config import setup_logging
from ai_switch.core.services.command_line import (
    PASSTHROUGH_DELIMITER,
    passthrough_args,
)

logger = logging.getLogger(__name__)

# ctx.meta key holding the args after "--"; meta is shared with subcommands
PASSTHROUGH_META = "ai_switch.passthrough"

DEFAULT_COMMAND = "use"


class AiGroup(click.Group):
    """Command group that splits off pass-through args and defaults to ``use``.

    Everything after the first ``--`` is kept out of click's parser and
    forwarded verbatim. A leading tool name without a command
    (``ai codex``) is routed to ``use``.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        args = list(args)
        ctx.meta[PASSTHROUGH_META] = passthrough_args(args)
        if PASSTHROUGH_DELIMITER in args:
            args = args[:args.index(PASSTHROUGH_DELIMITER)]

        # Group options are all flags, so the first bare word is the command
        for i, token in enumerate(args):
            if token.startswith("-"):
                continue
            if token not in self.commands:
                args.insert(i, DEFAULT_COMMAND)
            break

        return super().parse_args(ctx, args)


@click.group(cls=AiGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="ai")
@click.option("--dry-run", is_flag=True, help="Print commands without executing them.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(
    ctx: click.Context,
    dry_run: bool,
    verbose: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """One CLI to run Codex, Claude Code, or Gemini (and install if missing)."""
    ctx.ensure_object(dict)
    ctx.obj["dry_run"] = dry_run

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("AI_SWITCH_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("AI_SWITCH_LOG_FILE"),
        log_file_level=os.environ.get("AI_SWITCH_LOG_FILE_LEVEL"),
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(use)


# ── Helpers ─────────────────────────────────────────────────────


def _passthrough(ctx: click.Context) -> list[str]:
    return list(ctx.meta.get(PASSTHROUGH_META, []))


def _load_project_config():
    from ai_switch.core.config.loader import load_config

    # Config warnings surface through logging (stderr at the default level)
    return load_config(Path.cwd(), logger=logging.getLogger("ai_switch"))


def _prompt_for_tool() -> str:
    from ai_switch.core.services.tool_catalog import tool_keys

    return click.prompt(
        "Pick a tool to launch",
        type=click.Choice(tool_keys(), case_sensitive=False),
    )


def _ensure_installed(tool_key: str, dry_run: bool) -> bool:
    """Make sure the tool is on PATH, offering to install it if not."""
    from ai_switch.adapters.shell.command import is_installed, run_install_command
    from ai_switch.core.services.tool_catalog import (
        get_installer_choices,
        get_tool_definition,
    )

    tool = get_tool_definition(tool_key)
    if is_installed(tool.executable_name):
        return True

    if dry_run:
        click.secho(
            f"[dry-run] {tool.display_name} is not installed. Would prompt to install.",
            fg="yellow",
        )
        return True

    choices = get_installer_choices(tool)
    click.secho(f"{tool.display_name} is not installed. Install now?", bold=True)
    for i, choice in enumerate(choices, 1):
        click.echo(f"   {i}) {choice.label}")
    picked = click.prompt(
        "Choice",
        type=click.IntRange(1, len(choices)),
        default=1,
    )
    command = choices[picked - 1].command

    if not command:
        click.secho(
            "Cancelled. Install the tool manually and rerun the command.",
            fg="yellow",
        )
        return False

    click.secho(f"> {command}", fg="bright_cyan")
    code = run_install_command(command)
    if code != 0:
        click.secho(f"Install failed. Run manually: {command}", fg="red")
        return False

    click.secho(f"✅ {tool.display_name} installed.", fg="green")
    return True


def _launch(ctx: click.Context, tool_arg: str | None, fast_mode: bool) -> None:
    from ai_switch.adapters.shell.command import launch_tool
    from ai_switch.core.use_cases.launch import (
        UnknownToolError,
        plan_launch,
        resolve_tool,
    )

    if ctx.args:
        logger.debug("Ignoring extra arguments: %s", ctx.args)

    dry_run = ctx.obj.get("dry_run", False)
    config = _load_project_config()

    try:
        tool_key = resolve_tool(tool_arg, config)
    except UnknownToolError as e:
        click.secho(str(e), fg="red", err=True)
        sys.exit(1)

    if tool_key is None:
        tool_key = _prompt_for_tool().lower()

    if not _ensure_installed(tool_key, dry_run):
        sys.exit(1)

    plan = plan_launch(
        tool_key,
        fast_mode=fast_mode,
        config=config,
        passthrough=_passthrough(ctx),
    )

    if fast_mode:
        click.secho(
            "YOLO mode bypasses approvals and sandboxing. Proceed with caution.",
            fg="red",
            bold=True,
        )
        if plan.fast_flag_missing:
            click.secho(
                f"{plan.display_name} does not expose a documented "
                "YOLO/skip-permissions flag. Launching without extras.",
                fg="yellow",
            )

    click.secho(f"> {plan.display}", fg="bright_cyan")

    if dry_run:
        return

    sys.exit(launch_tool(plan.executable, plan.args))


# ── Commands ────────────────────────────────────────────────────


# Extra positionals are accepted and ignored; tool args go after "--"
_LAUNCH_SETTINGS = {"allow_extra_args": True}


@cli.command(context_settings=_LAUNCH_SETTINGS)
@click.argument("tool", required=False)
@click.pass_context
def use(ctx: click.Context, tool: str | None) -> None:
    """Launch a coding agent in the current directory.

    TOOL is one of codex, claude, gemini. Without it, the project's
    defaultTool is used, or you are asked to pick one.

    Arguments after ``--`` are passed to the tool unchanged:

        ai use codex -- --model o3
    """
    _launch(ctx, tool, fast_mode=False)


@cli.command(context_settings=_LAUNCH_SETTINGS)
@click.argument("tool")
@click.pass_context
def yolo(ctx: click.Context, tool: str) -> None:
    """Launch with the tool's documented skip-approvals flag."""
    _launch(ctx, tool, fast_mode=True)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def doctor(as_json: bool) -> None:
    """Show install status for supported tools."""
    from ai_switch.core.use_cases.doctor import check_tools

    statuses = check_tools()

    if as_json:
        click.echo(json.dumps([s.to_dict() for s in statuses], indent=2))
        return

    for status in statuses:
        if status.installed:
            click.secho("✔ ", fg="green", nl=False)
            click.echo(f"{status.key:<7} → {status.executable}")
        else:
            click.secho("✖ ", fg="yellow", nl=False)
            click.echo(f"{status.key:<7} → {status.executable} (not found)")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
