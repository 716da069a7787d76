"""
Command Line Interface for Taskline.
"""

import click
from .version import VERSION
from .config import load_settings
from .logs import setup_logging, get_logger
from .recovery import ConfigError
from .session import TaskSession
from .shell import Shell

log = get_logger("cli")


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="taskline")
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              envvar='TASKLINE_CONFIG', help='Path to a YAML configuration file')
@click.option('--debug', is_flag=True, default=False, help='Verbose console logging')
@click.pass_context
def main(ctx, config_path, debug):
    """
    Taskline - an interactive task manager with undo/redo,
    an urgent queue and a category view.

    Runs the interactive shell when no command is given.
    """
    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e))

    if debug:
        settings = settings.model_copy(update={"debug": True})

    setup_logging(settings)
    log.debug(f"Effective settings: {settings.model_dump()}")
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        ctx.invoke(shell)


@main.command()
@click.pass_obj
def shell(settings):
    """Start the interactive task menu."""
    session = TaskSession(root_label=settings.root_label)
    log.info("Starting interactive shell")
    Shell(session, settings).run()


@main.command()
@click.pass_obj
def config(settings):
    """Show the effective configuration as YAML."""
    click.echo(settings.to_yaml(), nl=False)


if __name__ == "__main__":
    main()
