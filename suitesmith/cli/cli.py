# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import logging
import sys
from pathlib import Path

import click

from .constants import CLI_NAME, ExitCode
from .context import ApplicationContext
from .exceptions import ConfigurationError
from .utils import console

logger = logging.getLogger(__name__)


def _version_callback(ctx, param, value):
    if not value:
        return
    import importlib.metadata
    from .messages import PACKAGE_NAME
    version = importlib.metadata.version(PACKAGE_NAME)
    console.print(f"[bold]{CLI_NAME}[/bold], version {version}")
    ctx.exit()


class LazyGroup(click.Group):
    def __init__(self, *args, lazy_commands=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.lazy_commands = lazy_commands or {}

    def list_commands(self, ctx):
        lazy_names = set(self.lazy_commands.keys())
        manual_names = set(super().list_commands(ctx))
        return sorted(lazy_names | manual_names)

    def get_command(self, ctx, name):
        if name in self.lazy_commands:
            from importlib import import_module
            module_path, attr_name = self.lazy_commands[name]
            module = import_module(module_path)
            return getattr(module, attr_name)

        return super().get_command(ctx, name)


def create_cli() -> click.Group:
    from suitesmith.cli.commands import COMMAND_MAP

    @click.pass_context
    def callback(
        ctx: click.Context,
        config: Path | None,
        license_file: Path | None,
        log_level: str | None,
    ) -> None:
        import yaml
        from pydantic import ValidationError

        try:
            ctx.obj = ApplicationContext.from_cli_args(
                config_file=config,
                license_file=license_file,
                log_level=log_level,
            )
        except (ValidationError, yaml.YAMLError, ValueError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

    cli = LazyGroup(
        name=CLI_NAME,
        callback=callback,
        context_settings={"help_option_names": ["-h", "--help"]},
        lazy_commands=COMMAND_MAP,
        help="suitesmith - Generate test suite sources from declarative test models.",
    )

    cli.params.append(click.Option(
        ["-c", "--config"],
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Override project configuration file"
    ))
    cli.params.append(click.Option(
        ["--license-file"],
        type=click.Path(dir_okay=False, path_type=Path),
        help="License header prepended to generated sources"
    ))
    cli.params.append(click.Option(
        ["-l", "--log-level"],
        type=click.Choice(["error", "warning", "info", "debug"]),
        default=None,
        metavar="LEVEL",
        help="Set log verbosity (error|warning|info|debug)"
    ))
    cli.params.append(click.Option(
        ["--version"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_version_callback,
        help="Show the version and exit."
    ))

    return cli


def main() -> None:
    """Run CLI with consistent error handling."""
    from .exceptions import CLIError

    try:
        cli = create_cli()
        cli(standalone_mode=False)
    except click.exceptions.Abort:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(ExitCode.INTERRUPTED)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except CLIError as e:
        console.print(e.format_for_console())
        sys.exit(e.exit_code)
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {e}")
        logging.exception(f"Unexpected error in {CLI_NAME} CLI")
        sys.exit(ExitCode.SOFTWARE)


if __name__ == "__main__":
    main()
