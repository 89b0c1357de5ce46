# mycontext/cli.py
"""Main entrypoint for the CLI."""
import asyncio
from pathlib import Path
from typing import Optional

import typer

from mycontext import __version__
from mycontext.commands.init import InitCommand
from mycontext.commands.status import StatusCommand
from mycontext.commands.update import UpdateCommand
from mycontext.core.exceptions import CommandFailed, MyContextError
from mycontext.core.logging import LogLevel, logger
from mycontext.llm.components import ComponentGenerator

app = typer.Typer(help="MyContext - scaffold Next.js apps with AI components and InstantDB")


def _run(coro) -> None:
    """Run a command coroutine, turning MyContextError into a non-zero exit."""
    try:
        asyncio.run(coro)
    except CommandFailed as e:
        logger.error(e.message)
        raise typer.Exit(code=e.exit_code or 1)
    except MyContextError as e:
        logger.error(e.message)
        raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mycontext {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only show errors"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Global output options."""
    if verbose:
        logger.set_quiet(False)
        logger.set_level(LogLevel.VERBOSE)
    elif quiet:
        logger.set_quiet(True)


@app.command()
def update() -> None:
    """Update mycontext to the latest published version."""
    _run(UpdateCommand().execute())


@app.command()
def init(
    name: str = typer.Argument(..., help="Project name (also the directory name), or '.' for the --path directory itself"),
    path: Path = typer.Option(Path("."), "--path", help="Parent directory"),
    instantdb: bool = typer.Option(True, "--instantdb/--no-instantdb", help="Add the InstantDB template"),
    app_id: Optional[str] = typer.Option(None, "--app-id", help="InstantDB app id for .env"),
    no_tailwind: bool = typer.Option(False, "--no-tailwind", help="Skip Tailwind CSS"),
    no_shadcn: bool = typer.Option(False, "--no-shadcn", help="Skip shadcn/ui config"),
    force: bool = typer.Option(False, "--force", help="Write into a non-empty directory"),
) -> None:
    """Scaffold a new Next.js project."""
    command = InitCommand(
        name,
        base_dir=path,
        with_instantdb=instantdb,
        app_id=app_id,
        with_tailwind=not no_tailwind,
        with_shadcn=not no_shadcn,
        force=force,
    )
    _run(command.execute())


@app.command("generate-component")
def generate_component(
    name: str = typer.Argument(..., help="Component name, e.g. UserCard"),
    description: str = typer.Option(..., "--description", "-d", help="What the component should do"),
    path: Path = typer.Option(Path("."), "--path", help="Project root"),
) -> None:
    """Generate a React component with AI (OpenRouter)."""
    _run(ComponentGenerator().generate(name, description, path))


@app.command()
def status(
    check: bool = typer.Option(False, "--check", help="Also ping the OpenRouter gateway"),
) -> None:
    """Show which integrations are configured."""
    _run(StatusCommand().execute(check_connection=check))


if __name__ == "__main__":
    app()
