# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import logging

import click
from rich.table import Table

from ..context import ApplicationContext
from ..utils import console

logger = logging.getLogger(__name__)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def config():
    """\b
    Configuration is read from suitesmith.yaml (searched upward from the
    current directory) and SUITESMITH_* environment variables.
    """
    pass


@config.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.pass_obj
def show(ctx: ApplicationContext) -> None:
    """Display the effective configuration."""
    effective = ctx.get_effective_config()

    table = Table(title="suitesmith configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("project_dir", str(effective.project_dir))
    table.add_row("license_file", str(effective.license_file) if effective.license_file else "[dim]none[/dim]")
    table.add_row("generator_name", effective.generator_name)
    table.add_row("source_extension", effective.source_extension)
    for name, value in effective.framework.model_dump().items():
        table.add_row(f"framework.{name}", value)
    table.add_row("logging.level", effective.logging.level)

    console.print(table)
