"""Typer-based CLI for the PHP QA tools setup wizard."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from .artifacts import ArtifactWriter
from .config import ConfigError, SetupConfig, load_config, save_config
from .flow import QuestionFlow, SetupAborted
from .prompts import AnswerRejected, ConsolePrompter, Prompter, ScriptedPrompter
from .questions import build_questions
from .rendering import create_environment

app = typer.Typer(help="Set up quality-assurance tools for a PHP project.")
console = Console()


def _configure_logging(level: str, log_file: Path | None) -> None:
    logger.remove()
    logger.add(console.print, level=level)
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level)


def _prompter(config: Optional[SetupConfig], no_interaction: bool) -> Prompter:
    if config is not None:
        return ScriptedPrompter(config.answers, console=console)
    if no_interaction:
        return ScriptedPrompter(console=console)
    return ConsolePrompter(console)


@app.command()
def install(
    project_root: Path = typer.Option(
        Path("."),
        "--project-root",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        help="Project directory paths are checked against and files are written to",
    ),
    answers: Optional[Path] = typer.Option(None, "--answers", help="YAML file with answers to use instead of prompting"),
    no_interaction: bool = typer.Option(False, "--no-interaction", "-n", help="Accept every default without prompting"),
    save_answers: Optional[Path] = typer.Option(None, "--save-answers", help="Write the collected answers to a YAML file"),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Installs all tools and config files."""

    _configure_logging(log_level.upper(), log_file)
    config: Optional[SetupConfig] = None
    if answers is not None:
        try:
            config = load_config(answers)
        except ConfigError as exc:
            console.print(f"[red]Configuration error:[/red] {escape(str(exc))}", soft_wrap=True)
            raise typer.Exit(code=4)

    templates_dir = Path(config.templates_dir) if config and config.templates_dir else None

    console.print("Starting setup of the QA tools for PHP")
    flow = QuestionFlow(build_questions(project_root), _prompter(config, no_interaction))
    try:
        settings = flow.run()
    except SetupAborted:
        return
    except AnswerRejected as exc:
        console.print(f"[red]Configuration error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=4)
    except EOFError:
        raise typer.Abort()

    writer = ArtifactWriter(project_root, environment=create_environment(templates_dir), console=console)
    writer.write(settings)

    if save_answers is not None:
        save_config(SetupConfig.from_settings(settings), save_answers)
        logger.debug("Saved answers to {}", save_answers)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
