"""Interactive prompts built on Typer.

Every prompt returns ``None`` when the user cancels (Ctrl-C or end of
input). An empty multi-selection is ``[]``, never ``None``.

Multi-select answers are comma-separated tokens, each one of:
- a 1-based choice number (``3``)
- an inclusive range (``2-4``)
- search text matching exactly one choice (case-insensitive)
"""

import re
from typing import Optional, Sequence

import typer

_RANGE_RE = re.compile(r"^(\d+)\s*-\s*(\d+)$")

MULTI_HINT = "numbers, ranges or search text, comma-separated; blank for none"


class SelectionParseError(ValueError):
    """Answer could not be mapped onto the offered choices."""

    pass


def resolve_token(token: str, choices: Sequence[str]) -> int:
    """Map one answer token to a zero-based choice index."""
    if token.isdecimal():
        number = int(token)
        if not 1 <= number <= len(choices):
            raise SelectionParseError(f"{number} is not between 1 and {len(choices)}")
        return number - 1

    needle = token.casefold()
    exact = [i for i, c in enumerate(choices) if c.casefold() == needle]
    if exact:
        return exact[0]

    partial = [i for i, c in enumerate(choices) if needle in c.casefold()]
    if not partial:
        raise SelectionParseError(f'No choice matches "{token}"')
    if len(partial) > 1:
        raise SelectionParseError(
            f'"{token}" matches {len(partial)} choices; type more of the name or use its number'
        )
    return partial[0]


def parse_selection(answer: str, choices: Sequence[str]) -> list[int]:
    """Parse a multi-select answer into ordered, de-duplicated indexes.

    Examples:
        >>> parse_selection("3, 1-2", ["a", "b", "c"])
        [2, 0, 1]
        >>> parse_selection("", ["a"])
        []
    """
    picked: list[int] = []
    for raw in answer.split(","):
        token = raw.strip()
        if not token:
            continue

        match = _RANGE_RE.match(token)
        if match:
            start, end = int(match.group(1)), int(match.group(2))
            if start > end:
                raise SelectionParseError(f"Range {token} is reversed")
            indexes = [resolve_token(str(n), choices) for n in range(start, end + 1)]
        else:
            indexes = [resolve_token(token, choices)]

        for index in indexes:
            if index not in picked:
                picked.append(index)
    return picked


def render_choices(choices: Sequence[str]) -> None:
    width = len(str(len(choices)))
    for number, label in enumerate(choices, start=1):
        typer.echo(f"  {number:>{width}}) {label}")


def choose_many(
    choices: Sequence[str],
    message: str,
    max_count: Optional[int] = None,
) -> Optional[list[int]]:
    """Ask for any number of choices.

    ``max_count`` is shown to the user but not enforced here; callers
    decide what an over-long selection means.

    Returns:
        Zero-based indexes in the order given, or None if cancelled
    """
    render_choices(choices)
    hint = MULTI_HINT if max_count is None else f"at most {max_count}; {MULTI_HINT}"
    while True:
        try:
            answer = typer.prompt(f"{message} ({hint})", default="", show_default=False)
        except typer.Abort:
            return None
        try:
            return parse_selection(answer, choices)
        except SelectionParseError as e:
            typer.echo(str(e), err=True)


def choose_one(choices: Sequence[str], message: str, default: int = 0) -> Optional[int]:
    """Ask for exactly one choice by number or search text."""
    render_choices(choices)
    while True:
        try:
            answer = typer.prompt(message, default=str(default + 1))
        except typer.Abort:
            return None
        try:
            return resolve_token(answer.strip(), choices)
        except SelectionParseError as e:
            typer.echo(str(e), err=True)


def confirm(message: str, default: bool = False) -> Optional[bool]:
    try:
        return typer.confirm(message, default=default)
    except typer.Abort:
        return None


def ask_text(message: str) -> Optional[str]:
    """Ask for non-blank text; returns it trimmed."""
    while True:
        try:
            answer = typer.prompt(message)
        except typer.Abort:
            return None
        text = answer.strip()
        if text:
            return text
        typer.echo("Required", err=True)
