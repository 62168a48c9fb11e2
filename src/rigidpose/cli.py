"""
rigidpose CLI - Command-line tools for pose inspection and averaging.

Provides commands for composing, inverting and averaging poses stored as YAML
records, and for building a pose from an odometry record.
"""

from pathlib import Path
from typing import NoReturn, Optional

import numpy as np
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rigidpose.config.schema import RigidPoseConfig
from rigidpose.pose.transform import Pose
from rigidpose.version import __version__

app = typer.Typer(
    name="rigidpose",
    help="rigidpose - Rigid-body pose tools for visual-inertial odometry.",
    add_completion=False,
)

console = Console()

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to configuration file.",
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]rigidpose[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """rigidpose - Rigid-body pose tools."""
    pass


def _setup(config: Optional[Path]) -> RigidPoseConfig:
    """Load configuration and configure logging."""
    from rigidpose.config.loader import get_default_config, load_config
    from rigidpose.logging.setup import configure_logging

    cfg = load_config(config) if config else get_default_config()
    configure_logging(
        cfg.project.log_level.value, cfg.project.run_id, cfg.project.json_logs
    )
    return cfg


def _print_pose(pose: Pose, cfg: RigidPoseConfig, title: str) -> None:
    """Print pose line and, if enabled, an Euler angle table."""
    from rigidpose.utils.math3d import rotation_matrix_to_euler

    console.print(
        pose.format(cfg.output.precision),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )

    if cfg.output.show_euler:
        roll, pitch, yaw = np.degrees(rotation_matrix_to_euler(pose.rotation_matrix))
        table = Table(title=title)
        table.add_column("Component", style="cyan")
        table.add_column("Value", style="green")
        p = cfg.output.precision
        table.add_row("roll (deg)", f"{roll:.{p}g}")
        table.add_row("pitch (deg)", f"{pitch:.{p}g}")
        table.add_row("yaw (deg)", f"{yaw:.{p}g}")
        console.print(table)


def _fail(e: Exception) -> NoReturn:
    console.print(
        f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True
    )
    raise typer.Exit(code=1)


@app.command()
def mean(
    samples: Path = typer.Argument(..., help="YAML file with weighted pose samples."),
    config: Optional[Path] = CONFIG_OPTION,
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the mean pose to this YAML file.",
    ),
) -> None:
    """Compute the weighted mean of pose samples."""
    from rigidpose.pose.mean import compute_mean_pose
    from rigidpose.pose.records import load_samples, save_pose

    try:
        cfg = _setup(config)
        pose_mean = compute_mean_pose(
            load_samples(samples),
            log_samples=cfg.mean.log_samples,
            warn_on_hemisphere_flip=cfg.mean.warn_on_hemisphere_flip,
        )
        if output:
            save_pose(pose_mean, output)
    except Exception as e:
        _fail(e)

    _print_pose(pose_mean, cfg, "Mean Pose")


@app.command()
def compose(
    first: Path = typer.Argument(..., help="YAML pose record applied last."),
    second: Path = typer.Argument(..., help="YAML pose record applied first."),
    config: Optional[Path] = CONFIG_OPTION,
) -> None:
    """Compose two poses (first * second)."""
    from rigidpose.pose.records import load_pose

    try:
        cfg = _setup(config)
        result = load_pose(first).compose(load_pose(second))
    except Exception as e:
        _fail(e)

    _print_pose(result, cfg, "Composed Pose")


@app.command()
def inverse(
    pose_file: Path = typer.Argument(..., help="YAML pose record."),
    config: Optional[Path] = CONFIG_OPTION,
) -> None:
    """Invert a pose."""
    from rigidpose.pose.records import load_pose

    try:
        cfg = _setup(config)
        result = load_pose(pose_file).inverse()
    except Exception as e:
        _fail(e)

    _print_pose(result, cfg, "Inverse Pose")


@app.command()
def odom(
    odom_file: Path = typer.Argument(..., help="YAML odometry record."),
    config: Optional[Path] = CONFIG_OPTION,
) -> None:
    """Build a pose from an odometry record."""
    from rigidpose.pose.odometry import load_odometry

    try:
        cfg = _setup(config)
        result = Pose.from_odometry(load_odometry(odom_file))
    except Exception as e:
        _fail(e)

    _print_pose(result, cfg, "Odometry Pose")


@app.command(name="version")
def show_version() -> None:
    """Show version information."""
    console.print(f"[bold blue]rigidpose[/bold blue] v{__version__}")
    console.print("Rigid-body pose tools for visual-inertial odometry.")


if __name__ == "__main__":
    app()
