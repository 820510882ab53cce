"""Run command - streams a border animation until interrupted."""

import logging
import time
from typing import Optional

import click
from pydantic import ValidationError

from hyprgborder.core import PreviewWorker
from hyprgborder.environment import validate_environment
from hyprgborder.exceptions import ErrorContext, HyprGBorderError, wrap_validation_error
from hyprgborder.models import AnimationConfig, AnimationDirection, AnimationType

from ..display import echo_error, log_path_from

logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.2


def build_config(
    animation_type: str,
    fps: int,
    speed: float,
    colors: tuple[str, ...],
    direction: str,
) -> AnimationConfig:
    """
    Build an AnimationConfig from command-line values.

    Raises:
        ConfigValidationError: If any value is invalid
    """
    try:
        return AnimationConfig(
            animation_type=animation_type,
            fps=fps,
            speed=speed,
            colors=list(colors),
            direction=direction,
        )
    except ValidationError as e:
        raise wrap_validation_error(e, source="command line") from e


def wait_for_worker(worker: PreviewWorker, duration: Optional[float]) -> None:
    """Block until the worker dies, ``duration`` elapses, or Ctrl+C."""
    deadline = None if duration is None else time.monotonic() + duration
    while worker.is_running:
        if deadline is not None and time.monotonic() >= deadline:
            break
        time.sleep(POLL_INTERVAL)


@click.command()
@click.option(
    '--type', '-t', 'animation_type',
    type=click.Choice([t.value for t in AnimationType], case_sensitive=False),
    default=AnimationType.RAINBOW.value,
    help='Animation style (default: rainbow)'
)
@click.option('--fps', type=int, default=30, help='Frames per second, 1-120 (default: 30)')
@click.option('--speed', type=float, default=0.01, help='Phase advance per frame, 0.001-1.0 (default: 0.01)')
@click.option(
    '--color', '-c', 'colors',
    multiple=True,
    help='Border color as #RRGGBB or r,g,b (repeatable)'
)
@click.option(
    '--direction',
    type=click.Choice([d.value for d in AnimationDirection], case_sensitive=False),
    default=AnimationDirection.CLOCKWISE.value,
    help='Rainbow direction (default: clockwise)'
)
@click.option('--duration', type=float, default=None, help='Stop after this many seconds')
@click.option(
    '--skip-env-check',
    is_flag=True,
    help='Do not check for a running Hyprland process before starting'
)
@click.pass_context
def run(
    ctx,
    animation_type: str,
    fps: int,
    speed: float,
    colors: tuple[str, ...],
    direction: str,
    duration: Optional[float],
    skip_env_check: bool,
):
    """
    Animate the active window border.

    The original border is restored on exit. Press Ctrl+C to stop.
    """
    log_path = log_path_from(ctx)

    try:
        config = build_config(animation_type.lower(), fps, speed, colors, direction.lower())
        if not skip_env_check:
            validate_environment()

        worker = PreviewWorker(config)
        with ErrorContext("start preview", logger):
            worker.start()
    except HyprGBorderError as e:
        echo_error(e, log_path)
        ctx.exit(1)

    click.echo(
        f"Running {config.animation_type.value} animation at {config.fps} FPS "
        "(Ctrl+C to stop)"
    )

    try:
        wait_for_worker(worker, duration)
    except KeyboardInterrupt:
        logger.info("Preview interrupted by user")
        click.echo("\nStopping...", err=True)
    finally:
        worker.stop()

    stats = worker.get_stats()
    click.echo(f"Stopped after {stats.frames_rendered} frames")
