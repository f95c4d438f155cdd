# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import logging
from pathlib import Path

import click

from ..context import ApplicationContext
from ..exceptions import ConfigurationError, OutputError, ValidationError
from ..messages import DUPLICATE_OUTPUT_HINTS, LICENSE_HINTS, MANIFEST_HINTS
from ..utils import console, format_status, success

logger = logging.getLogger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--base-dir", "-o", type=click.Path(file_okay=False, path_type=Path),
              help="Root of generated sources (default: base_dir from the manifest)")
@click.option("--dry-run", is_flag=True,
              help="Report which files would change without writing them")
@click.pass_obj
def generate(
    ctx: ApplicationContext,
    manifest: Path,
    base_dir: Path | None,
    dry_run: bool,
) -> None:
    """MANIFEST: YAML file listing the suites to generate"""
    from suitesmith.errors import DuplicateOutputPathError, EmptySuiteError, ManifestError
    from suitesmith.manifest import generate_suites, load_manifest
    from suitesmith.registry import GeneratedFilesRegistry

    config = ctx.get_effective_config()

    try:
        suite_manifest = load_manifest(manifest)
    except ManifestError as e:
        raise ValidationError(str(e), details=MANIFEST_HINTS) from e

    if base_dir is not None:
        base_dir = base_dir.resolve()

    try:
        results = generate_suites(
            suite_manifest,
            base_dir=base_dir,
            registry=GeneratedFilesRegistry(),
            config=config,
            dry_run=dry_run,
        )
    except DuplicateOutputPathError as e:
        raise ConfigurationError(str(e), details=DUPLICATE_OUTPUT_HINTS) from e
    except EmptySuiteError as e:
        raise ValidationError(str(e), details=MANIFEST_HINTS) from e
    except FileNotFoundError as e:
        if config.license_file is not None and Path(e.filename or "") == config.license_file:
            raise ConfigurationError(
                f"License file not found: {config.license_file}", details=LICENSE_HINTS
            ) from e
        raise OutputError(f"Failed to write generated sources: {e}") from e
    except OSError as e:
        raise OutputError(f"Failed to write generated sources: {e}") from e

    for path, changed in results.items():
        if dry_run:
            status = format_status("would change" if changed else "unchanged", changed)
        else:
            status = format_status("written" if changed else "unchanged", changed)
        console.print(f"  {status}  {path}")

    changed_count = sum(results.values())
    if dry_run:
        success(f"{changed_count} of {len(results)} suites would change")
    else:
        success(f"Generated {len(results)} suites ({changed_count} changed)")
