#!filepath: breadsim/cli.py
from enum import Enum
from typing import Optional

import typer
import yaml
from pydantic import ValidationError as ConfigValidationError
from rich.console import Console
from rich.markup import escape

from breadsim import AppConfig, __version__, logs
from breadsim.config.simulation_config import acquire_config
from breadsim.utils.errors import UserInputError
from breadsim.workflows.run_simulation import run_simulation_workflow

app = typer.Typer(
    help="Bread consumption / staleness simulator",
    add_completion=False,
)

err_console = Console(stderr=True)


class ReportFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


def _version_callback(value: bool):
    if value:
        typer.echo(f"breadsim v{__version__}")
        raise typer.Exit()


@app.command()
def simulate(
    num_days: Optional[str] = typer.Argument(
        None, metavar="NUM_DAYS", help="Simulation horizon in days (positive integer)"
    ),
    deliveries: Optional[str] = typer.Argument(
        None,
        metavar="DELIVERIES",
        help='Whitespace-separated "(day,quantity)" tuples, may be empty',
    ),
    initial_stock: Optional[int] = typer.Option(
        None, "--initial-stock", help="Units on hand before day 1 (default from config: 0)"
    ),
    shelf_life: Optional[int] = typer.Option(
        None, "--shelf-life", help="Age in days from which eaten bread counts as expired"
    ),
    report_format: ReportFormat = typer.Option(
        ReportFormat.TEXT, "--format", help="Report format"
    ),
    daily: bool = typer.Option(False, "--daily", help="Append the per-day ledger table"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to a YAML config"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True
    ),
):
    """
    Simulate NUM_DAYS of oldest-first bread consumption.

    Example:  breadsim 60 "(10,200) (15,100) (35,500) (50,30)"
    """
    try:
        app_cfg = AppConfig.load(config)
    except FileNotFoundError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    except (ConfigValidationError, yaml.YAMLError) as e:
        # 配置文件内容非法：同样不打印 traceback
        err_console.print(f"[red]Invalid config file:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    logs.reconfigure(
        log_dir=app_cfg.log.dir,
        rotation=app_cfg.log.rotation,
        retention=app_cfg.log.retention,
        log_level=app_cfg.log.level,
    )

    try:
        cfg = acquire_config(
            num_days,
            deliveries,
            defaults=app_cfg.simulation,
            initial_stock=initial_stock,
            shelf_life=shelf_life,
        )
        ctx = run_simulation_workflow(
            cfg,
            report_format=report_format.value,
            include_daily=daily,
        )
    except UserInputError as e:
        # 用户输入错误：不打印 traceback，不输出报告
        err_console.print(f"[red]{type(e).__name__}:[/red] {escape(str(e))}")
        raise typer.Exit(code=e.exit_code)

    typer.echo(ctx.report)


if __name__ == "__main__":
    app()

# python -m breadsim.cli 60 "(10,200) (15,100) (35,500) (50,30)"
