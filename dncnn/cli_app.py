"""
DnCNN Builder Command-Line Interface.

Provides the ``dncnn`` entry point with two commands:

- ``dncnn init``  — generate a starter recipe YAML with all defaults
- ``dncnn build`` — validate a recipe, assemble the network and log its layers

Usage:
    dncnn init
    dncnn build recipe.yaml
    dncnn build recipe.yaml --set net_depth=20 --set relu_type=leaky --seed 0
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Annotated, Any

import typer

app = typer.Typer(
    name="dncnn",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


# ── App callback ────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from importlib.metadata import version as pkg_version

        typer.echo(f"dncnn-builder {pkg_version('dncnn-builder')}")
        raise typer.Exit()


@app.callback()
def main(
    _: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """DnCNN Builder: declarative DnCNN denoiser specifications."""
    ...  # pragma: no cover


# ── Commands ────────────────────────────────────────────────────────────────


@app.command()
def init(
    output: Annotated[
        Path,
        typer.Argument(help="Output YAML file path."),
    ] = Path("recipe.yaml"),
    image_size: Annotated[
        str,
        typer.Option("--image-size", help="Image size: n, h,w or h,w,c."),
    ] = "128,128,1",
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file."),
    ] = False,
) -> None:
    """Generate a starter recipe with all build options and their defaults."""
    from dncnn.core import Recipe, save_config_as_yaml

    if output.exists() and not force:
        typer.echo(f"Error: '{output}' already exists. Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    recipe = Recipe(image_size=_parse_int_list(image_size))
    save_config_as_yaml(recipe, output, header=_INIT_HEADER.format(filename=output.name))
    typer.echo(f"Recipe created: {output}")
    typer.echo(f"Build it with:  dncnn build {output}")


@app.command()
def build(
    recipe: Annotated[
        Path,
        typer.Argument(help="Path to YAML recipe file."),
    ],
    set_: Annotated[
        list[str] | None,
        typer.Option(
            "--set",
            help="Override recipe value (repeatable): key=value",
        ),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for weight initialization."),
    ] = None,
    log_dir: Annotated[
        Path | None,
        typer.Option("--log-dir", help="Also write logs to this directory."),
    ] = None,
    level: Annotated[
        str,
        typer.Option("--level", help="Logging level."),
    ] = "INFO",
    materialize: Annotated[
        bool,
        typer.Option("--torch", help="Also materialize the network as a PyTorch model."),
    ] = False,
) -> None:
    """Validate a recipe and assemble the DnCNN layer sequence."""
    from pydantic import ValidationError

    from dncnn import DnCNNError, build_network, to_torch
    from dncnn.core import LOGGER_NAME, Logger, LogStyle, Recipe

    if not recipe.exists():
        typer.echo(f"Error: recipe not found: {recipe}", err=True)
        raise typer.Exit(code=1)

    run_logger = Logger.setup(name=LOGGER_NAME, log_dir=log_dir, level=level)
    LogStyle.log_phase_header(run_logger, f"DnCNN BUILD - {recipe.name}")

    try:
        parsed = Recipe.from_yaml(recipe, overrides=_parse_overrides(set_ or []))
        layers = build_network(
            parsed.image_size,
            net_depth=parsed.net_depth,
            net_width=parsed.net_width,
            relu_type=parsed.relu_type,
            loss_function=parsed.loss_function,
            seed=seed,
        )
    except (DnCNNError, ValidationError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if materialize:
        model, criterion = to_torch(layers)
        total_params = sum(p.numel() for p in model.parameters())
        run_logger.info(
            f"{LogStyle.INDENT}{LogStyle.ARROW} {'PyTorch':<14}: "
            f"{len(model)} modules | Parameters: {total_params:,} | "
            f"Criterion: {type(criterion).__name__}"
        )


# ── Private helpers ─────────────────────────────────────────────────────────

# Bare comma-separated integers, e.g. "64,64,3"
_INT_LIST_RE = re.compile(r"\s*-?\d+\s*(,\s*-?\d+\s*)+,?\s*")

_INIT_HEADER = """\
# ==============================================================================
# DnCNN Builder — Starter Recipe (generated by `dncnn init`)
# ==============================================================================
# Usage:   dncnn build {filename}
#
# image_size    : n, [h, w] or [h, w, c]
# net_depth     : number of conv layers (>= 2)
# net_width     : filters per hidden conv layer (>= 1)
# relu_type     : relu | leaky | clipped
# loss_function : mse
# ==============================================================================

"""


def _auto_cast(value: str) -> Any:
    """
    Cast a CLI string to the appropriate Python value.

    Args:
        value: Raw string from the command line.

    Returns:
        Converted bool, None, int, float, list of ints, or the original string.
    """
    low = value.lower()
    if low in ("true", "false"):
        return low == "true"
    if low in ("null", "none"):
        return None
    if value.startswith("[") and value.endswith("]"):
        return _parse_int_list(value[1:-1])
    if _INT_LIST_RE.fullmatch(value):
        return _parse_int_list(value)
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        pass
    return value


def _parse_int_list(raw: str) -> int | list[int]:
    """
    Parse ``"64"`` or ``"64,64,3"`` into an int or a list of ints.

    Raises:
        typer.BadParameter: If an item is not an integer.
    """
    items = [item.strip() for item in raw.split(",") if item.strip()]
    if not items:
        raise typer.BadParameter("Expected at least one integer, got an empty value")
    try:
        values = [int(item) for item in items]
    except ValueError:
        raise typer.BadParameter(f"Expected comma-separated integers, got: '{raw}'")
    return values[0] if len(values) == 1 else values


def _parse_overrides(raw: list[str]) -> dict[str, Any]:
    """
    Parse ``key=value`` strings into an override dict.

    Args:
        raw: list of "key=value" strings from ``--set`` flags.

    Returns:
        dict mapping keys to auto-casted values.

    Raises:
        typer.BadParameter: If an item has no ``=`` or an empty key.
    """
    overrides: dict[str, Any] = {}
    for item in raw:
        if "=" not in item:
            raise typer.BadParameter(f"Override must use key=value format, got: '{item}'")
        key, _, val = item.partition("=")
        key = key.strip()
        if not key:
            raise typer.BadParameter(f"Empty key in override: '{item}'")
        overrides[key] = _auto_cast(val.strip())
    return overrides
