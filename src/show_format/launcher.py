"""Command line launcher for validating and inspecting show files."""

import click
import dotenv
import json
import logging
import sys

from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from . import logger
from .camera import get_cameras_from_show_specification
from .compiled import load_compiled_show
from .config import LoaderConfiguration
from .errors import MalformedContainerError, ShowFormatError
from .logger import log
from .specification import (
    get_drone_count_from_show_specification,
    get_environment_type_from_show_specification,
    get_title_from_show_specification,
)
from .types import ShowSpecification
from .validation import validate_show_specification
from .version import __version__


def _load(filename: str, config: LoaderConfiguration) -> ShowSpecification:
    """Loads and validates a show specification from the given file. JSON
    files are treated as raw show specifications, everything else as
    compiled show files.
    """
    path = Path(filename)
    data = path.read_bytes()

    if path.suffix.lower() == ".json":
        try:
            spec: Dict[str, Any] = json.loads(data.decode("utf-8"))
        except ValueError as ex:
            raise MalformedContainerError(f"Invalid JSON file ({ex})") from ex
        validate_show_specification(spec, max_drone_count=config.max_drone_count)
        return spec
    else:
        return load_compiled_show(
            data, assets=config.load_assets, max_drone_count=config.max_drone_count
        ).specification


@click.group()
@click.option("-d", "--debug/--no-debug", default=False, help="Show debug messages")
@click.option(
    "-q", "--quiet/--no-quiet", default=False, help="Show warnings and errors only"
)
@click.option(
    "--log-style",
    type=click.Choice(["fancy", "plain"]),
    default="fancy",
    help="Specify the style of the logging output",
)
@click.option(
    "--max-drones",
    metavar="COUNT",
    type=int,
    default=None,
    help="Maximum number of drones allowed in a show. Takes precedence over "
    "the SKYC_MAX_DRONE_COUNT environment variable.",
)
@click.option(
    "--assets/--no-assets",
    default=None,
    help="Whether to load binary assets from compiled show files",
)
@click.version_option(version=__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    debug: bool = False,
    quiet: bool = False,
    log_style: str = "fancy",
    max_drones: Optional[int] = None,
    assets: Optional[bool] = None,
):
    """Validate and inspect Skybrush show files."""
    logger.install(
        level=logging.DEBUG if debug else logging.WARN if quiet else logging.INFO,
        style=log_style,
    )

    # Load environment variables from .env
    dotenv.load_dotenv(verbose=debug)

    try:
        config = LoaderConfiguration.from_environment()
    except ValueError as ex:
        raise click.ClickException(f"Invalid configuration: {ex}")

    if max_drones is not None:
        config.update_from_json({"maxDroneCount": max_drones})
    if assets is not None:
        config.update_from_json({"assets": assets})

    ctx.obj = config


@cli.command()
@click.argument(
    "filenames",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False),
)
@click.pass_obj
def validate(config: LoaderConfiguration, filenames: Sequence[str]):
    """Validate one or more show files."""
    failed = 0

    for filename in filenames:
        try:
            _load(filename, config)
        except ShowFormatError as ex:
            failed += 1
            log.error(f"{filename}: {ex}", extra={"semantics": "failure"})
        else:
            log.info(f"{filename}: OK", extra={"semantics": "success"})

    if failed:
        sys.exit(1)


@cli.command()
@click.argument("filename", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def cameras(config: LoaderConfiguration, filename: str):
    """List the cameras of a show file."""
    try:
        spec = _load(filename, config)
    except ShowFormatError as ex:
        raise click.ClickException(f"{filename}: {ex}")

    for index, camera in enumerate(get_cameras_from_show_specification(spec)):
        name = camera.get("name") or f"Camera {index + 1}"
        marker = " (default)" if camera.get("default") else ""
        click.echo(f"{name}{marker}")


@cli.command()
@click.argument("filename", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def info(config: LoaderConfiguration, filename: str):
    """Print basic information about a show file."""
    try:
        spec = _load(filename, config)
    except ShowFormatError as ex:
        raise click.ClickException(f"{filename}: {ex}")

    title = get_title_from_show_specification(spec) or "(untitled)"
    click.echo(f"Title: {title}")
    click.echo(f"Drones: {get_drone_count_from_show_specification(spec)}")
    click.echo(f"Environment: {get_environment_type_from_show_specification(spec).value}")
    click.echo(f"Cameras: {len(get_cameras_from_show_specification(spec))}")


def start():
    """Entry point of the ``skyc`` console script."""
    return cli(prog_name="skyc")


if __name__ == "__main__":
    sys.exit(start())
