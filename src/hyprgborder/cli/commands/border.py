"""One-off border settings."""

import logging

import click

from hyprgborder.colors import hex_to_hyprland
from hyprgborder.exceptions import HyprGBorderError
from hyprgborder.ipc import (
    BorderSnapshot,
    HyprlandBorderVars,
    get_socket_path,
    send_keyword_command,
    set_border_rounding,
    set_border_size,
    set_drop_shadow,
    set_shadow_color,
)

from ..display import echo_error, log_path_from

logger = logging.getLogger(__name__)


@click.group(name="border")
def border_group():
    """Read or change border settings once, without animating."""
    pass


def _apply(ctx: click.Context, description: str, action) -> None:
    """Run ``action(socket_path)``, reporting errors and exiting non-zero on failure."""
    try:
        action(get_socket_path())
    except HyprGBorderError as e:
        logger.error(f"Failed to {description}: {e.technical_message}")
        echo_error(e, log_path_from(ctx))
        ctx.exit(1)
    click.echo(f"[OK] {description}")


@border_group.command(name="show")
@click.pass_context
def show_border(ctx):
    """Print the active border color as Hyprland reports it."""
    try:
        snapshot = BorderSnapshot.capture(get_socket_path())
    except HyprGBorderError as e:
        echo_error(e, log_path_from(ctx))
        ctx.exit(1)
    click.echo(snapshot.border_value())


@border_group.command(name="color")
@click.argument("color")
@click.pass_context
def set_color(ctx, color: str):
    """Set a static active border COLOR (#RRGGBB)."""
    try:
        value = hex_to_hyprland(color)
    except HyprGBorderError as e:
        echo_error(e)
        ctx.exit(1)
    _apply(
        ctx,
        f"set border color {color}",
        lambda path: send_keyword_command(path, HyprlandBorderVars.ACTIVE_BORDER, value),
    )


@border_group.command(name="size")
@click.argument("size", type=click.IntRange(min=0))
@click.pass_context
def set_size(ctx, size: int):
    """Set the border width in pixels."""
    _apply(ctx, f"set border size {size}", lambda path: set_border_size(path, size))


@border_group.command(name="rounding")
@click.argument("rounding", type=click.IntRange(min=0))
@click.pass_context
def set_rounding(ctx, rounding: int):
    """Set the corner rounding radius."""
    _apply(ctx, f"set rounding {rounding}", lambda path: set_border_rounding(path, rounding))


@border_group.command(name="shadow")
@click.argument("state", type=click.Choice(["on", "off"]))
@click.option("--color", default=None, help="Shadow color (#RRGGBB or 0xAARRGGBB)")
@click.pass_context
def set_shadow(ctx, state: str, color):
    """Turn the drop shadow on or off."""
    _apply(ctx, f"turn shadow {state}", lambda path: set_drop_shadow(path, state == "on"))
    if color:
        _apply(ctx, f"set shadow color {color}", lambda path: set_shadow_color(path, color))
