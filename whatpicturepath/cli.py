from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import typer
import yaml

from whatpicturepath.config import load_config, write_default_config
from whatpicturepath.console import TerminalConsole
from whatpicturepath.i18n import Messages, resolve_culture
from whatpicturepath.selection import SelectionSet
from whatpicturepath.session import SessionController

app = typer.Typer(add_completion=False, help="Collect picture files and print them as file:// URIs.")
LOGGER = logging.getLogger("whatpicturepath")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_config_or_exit(config_path: Path | None) -> dict[str, Any]:
    try:
        return load_config(config_path)
    except (OSError, yaml.YAMLError) as exc:
        typer.secho(f"Config load failed: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(1)


def run_session(
    paths: list[str] | None = None,
    lang: str | None = None,
    log_level: str | None = None,
    config_path: Path | None = None,
) -> int:
    cfg = _load_config_or_exit(config_path)
    _setup_logging(log_level or str(cfg.get("log_level", "warning")))

    culture = resolve_culture(lang or str(cfg.get("lang", "auto")))
    LOGGER.info("culture=%s", culture)
    messages = Messages(culture)
    console = TerminalConsole(separator_width=int(cfg.get("separator_width", 50)))

    selection = SelectionSet()
    if paths:
        # 启动参数中的文件（如「打开方式」）按同样规则预先加入
        result = selection.merge(paths)
        LOGGER.info("startup files added=%s skipped=%s", result.added, result.skipped)

    session = SessionController(
        console,
        messages,
        selection=selection,
        dialog_start_dir=str(cfg.get("dialog_start_dir") or ""),
    )
    return session.run()


@app.callback(invoke_without_command=True)
def _default(
    ctx: typer.Context,
    lang: str | None = typer.Option(None, "--lang", help="auto|zh-CN|en-US"),
    log_level: str | None = typer.Option(None, "--log-level"),
    config: Path | None = typer.Option(None, "--config", dir_okay=False, help="Config file path."),
) -> None:
    """Without a command, start a session. Startup files need the run command."""
    ctx.obj = {"lang": lang, "log_level": log_level, "config": config}
    if ctx.invoked_subcommand is None:
        raise typer.Exit(run_session(lang=lang, log_level=log_level, config_path=config))


@app.command()
def run(
    ctx: typer.Context,
    paths: list[str] | None = typer.Argument(None, help="Picture files to select on startup."),
    lang: str | None = typer.Option(None, "--lang", help="auto|zh-CN|en-US"),
    log_level: str | None = typer.Option(None, "--log-level"),
    config: Path | None = typer.Option(None, "--config", dir_okay=False, help="Config file path."),
) -> None:
    """Start the interactive picture path session."""
    # 顶层选项作为 run 自身选项的默认值
    shared = ctx.obj or {}
    raise typer.Exit(
        run_session(
            paths,
            lang=lang or shared.get("lang"),
            log_level=log_level or shared.get("log_level"),
            config_path=config or shared.get("config"),
        )
    )


@app.command("init-config")
def init_config(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", help="Overwrite existing config file."),
    config: Path | None = typer.Option(None, "--config", dir_okay=False, help="Config file path."),
) -> None:
    path = write_default_config(config or (ctx.obj or {}).get("config"), force=force)
    typer.echo(f"Config initialized: {path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
