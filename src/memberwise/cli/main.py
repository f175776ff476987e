"""
CLI for inspecting generated comparers: describe, check.
Targets are given as module:QualifiedName, e.g. shop.domain:Address.
"""
from __future__ import annotations

import importlib
import logging
from typing import Any, List

try:
    import typer
except ImportError as exc:
    raise ImportError(
        "memberwise CLI requires typer: pip install 'memberwise[cli]' or pip install typer"
    ) from exc

from memberwise.core.errors import MemberwiseError
from memberwise.core.logging import configure_logging, get_logger
from memberwise.equality.members import MemberMode, describe_members
from memberwise.equality.registry import ComparerRegistry, default_registry

logger = get_logger(__name__)

app = typer.Typer(help="Memberwise CLI: inspect member plans and build comparers.")


def _load_class(target: str) -> type:
    """Import module:Qualified.Name and return the class."""
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise MemberwiseError(f"target must look like module:ClassName, got {target!r}")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise MemberwiseError(f"cannot import {module_name!r}: {exc}") from exc
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise MemberwiseError(f"{module_name!r} has no attribute {qualname!r}") from None
    if not isinstance(obj, type):
        raise MemberwiseError(f"{target} is not a class")
    return obj


def _annotation_text(annotation: Any) -> str:
    if isinstance(annotation, type):
        return annotation.__qualname__
    return repr(annotation).replace("typing.", "")


@app.command()
def describe(
    target: str = typer.Argument(..., help="Class to inspect (module:ClassName)"),
    mode: MemberMode = typer.Option(MemberMode.FIELDS, "--mode", "-m", help="Member selection mode"),
) -> None:
    """Print the members a comparer would use, in comparison order."""
    try:
        cls = _load_class(target)
        members = describe_members(cls, mode)
    except MemberwiseError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(1)

    used = sum(1 for m in members if not m.ignored)
    typer.echo(f"{cls.__qualname__} ({mode.value}): {used} member(s)")
    if not members:
        typer.echo("  (no members: all instances compare equal)")
    width = max((len(m.name) for m in members), default=0)
    for m in members:
        category = "ignored" if m.ignored else m.category.value
        typer.echo(f"  {m.name.ljust(width)}  {category.ljust(9)}  {_annotation_text(m.annotation)}")


@app.command()
def check(
    targets: List[str] = typer.Argument(..., help="Classes to build comparers for (module:ClassName)"),
    isolated: bool = typer.Option(False, "--isolated", help="Use a fresh registry instead of the default one"),
) -> None:
    """Build the fields and properties comparers for each class; exit 1 on the first failure."""
    registry = ComparerRegistry() if isolated else default_registry()
    for target in targets:
        try:
            cls = _load_class(target)
            for mode in MemberMode:
                comparer = registry.get(cls, mode)
                typer.echo(f"ok  {target} [{mode.value}] {len(comparer.members)} member(s)")
        except MemberwiseError as exc:
            typer.echo(f"FAIL {target}: {exc}", err=True)
            raise typer.Exit(1)
    logger.info("Checked %d class(es)", len(targets))


def main() -> None:
    """Entry point for the memberwise console command."""
    configure_logging(default_level=logging.INFO)
    app()


if __name__ == "__main__":
    main()
