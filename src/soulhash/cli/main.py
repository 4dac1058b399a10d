"""Typer CLI entrypoint and command definitions for soulhash."""

from pathlib import Path
from typing import Optional

import typer

from soulhash.core.config import HasherConfig
from soulhash.core.types import HashMode

app = typer.Typer()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug diagnostics to stderr"),
    trace: bool = typer.Option(False, "--trace", help="Also log every file read and skipped entry"),
    config: Optional[Path] = typer.Option(None, "--config", help="JSON config with extension/marker overrides; built-in defaults when omitted"),
) -> None:
    """Textual and semantic fingerprints for source artifacts."""
    from soulhash.core.logging import configure_logging

    configure_logging(verbose, trace=trace)
    try:
        ctx.obj = HasherConfig() if config is None else HasherConfig.load(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)


# -- content ------------------------------------------------------------------


@app.command("content")
def content_cmd(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Literal text to hash (original argv bytes)"),
    mode: Optional[HashMode] = typer.Option(None, "--mode", help="Hash mode; auto-detected when omitted"),
) -> None:
    """Hash a literal string."""
    from soulhash.hasher.dispatch import auto_hash, hash_content

    cfg: HasherConfig = ctx.obj
    # surrogateescape restores argv bytes that were not valid UTF-8
    content = text.encode("utf-8", errors="surrogateescape")
    if mode is None:
        typer.echo(auto_hash(content, cfg.auto_detect_markers))
    else:
        typer.echo(hash_content(content, mode))


# -- file ---------------------------------------------------------------------


@app.command("file")
def file_cmd(
    ctx: typer.Context,
    paths: list[Path] = typer.Argument(..., help="Files to hash"),
    semantic: bool = typer.Option(True, "--semantic/--textual", help="Protein-hash code files"),
    dual: bool = typer.Option(False, "--dual", help="Print '<semantic>:<textual>' for every file"),
) -> None:
    """Hash files and print '<hash>  <path>' lines."""
    from soulhash.hasher.files import dual_hash_file, hash_file

    cfg: HasherConfig = ctx.obj
    failed = 0
    for path in paths:
        if dual:
            result = dual_hash_file(path)
            digest = None if result is None else str(result)
        else:
            digest = hash_file(path, semantic, code_extensions=cfg.code_extensions)

        if digest is None:
            typer.echo(f"Could not read: {path}", err=True)
            failed += 1
            continue
        typer.echo(f"{digest}  {path}")

    if failed:
        raise typer.Exit(code=1)


# -- souls --------------------------------------------------------------------


@app.command("souls")
def souls_cmd(
    paths: list[Path] = typer.Argument(..., help="Files to group by semantic hash"),
) -> None:
    """Group files by semantic hash and print souls with two or more siblings.

    Unreadable files are reported on stderr and make the exit code 1, after
    the groups of the readable files have been printed.
    """
    from soulhash.soul_registry import SoulRegistry

    registry = SoulRegistry()
    failed = 0
    for path in paths:
        if registry.register_file(path) is None:
            typer.echo(f"Could not read: {path}", err=True)
            failed += 1

    groups = {soul: members for soul, members in registry.souls().items() if len(members) > 1}
    if not groups:
        typer.echo("No soul siblings found.")

    for soul, members in groups.items():
        typer.echo(f"{soul} ({len(members)} files)")
        for member in members:
            typer.echo(f"  {member}")

    if failed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
