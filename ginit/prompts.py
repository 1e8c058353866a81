# ginit/prompts.py
"""
Interactive questions, rendered with :mod:`click`.

The workflow only talks to a :class:`Prompter`; tests substitute one that
returns scripted answers.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

import click

from .errors import CredentialValidationError


def require(value: Optional[str], error: str, strip: bool = True) -> str:
    """Return *value*, or raise :class:`CredentialValidationError` if empty.

    With *strip* the value is trimmed first, so blank answers count as empty.
    """
    value = value or ""
    if strip:
        value = value.strip()
    if not value:
        raise CredentialValidationError(error)
    return value


def ask_required(ask: Callable[[], Optional[str]], error: str, strip: bool = True) -> str:
    """Call *ask* until it yields a non-empty answer.

    Validation failures are reported and never escape this function.
    """
    while True:
        try:
            return require(ask(), error, strip=strip)
        except CredentialValidationError as exc:
            click.secho(str(exc), fg="red")


class Prompter:
    """Terminal prompts.

    Every method blocks until the user answers; there is no timeout.
    """

    def text(self, message: str, default: Optional[str] = None) -> str:
        return click.prompt(
            message,
            default=default if default is not None else "",
            show_default=bool(default),
        )

    def password(self, message: str) -> str:
        return click.prompt(message, default="", show_default=False, hide_input=True)

    def choice(self, message: str, choices: Sequence[str], default: str) -> str:
        return click.prompt(
            message,
            type=click.Choice(list(choices)),
            default=default,
            show_choices=True,
        )

    def checkbox(
        self,
        message: str,
        choices: Sequence[str],
        default: Sequence[str] = (),
    ) -> List[str]:
        """Multi-select by number, e.g. ``1,3``.  Answer ``-`` for none."""
        click.echo(message)
        for i, item in enumerate(choices, start=1):
            mark = "x" if item in default else " "
            click.echo(f"  [{mark}] {i}) {item}")
        preset = ",".join(str(choices.index(d) + 1) for d in default if d in choices)
        while True:
            answer = click.prompt(
                "Numbers, comma separated (- for none)",
                default=preset or "-",
            )
            try:
                return _parse_selection(answer, choices)
            except ValueError as exc:
                click.secho(str(exc), fg="red")


def _parse_selection(answer: str, choices: Sequence[str]) -> List[str]:
    answer = answer.strip()
    if answer in ("", "-"):
        return []
    picked: List[str] = []
    for part in answer.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit() or not 1 <= int(part) <= len(choices):
            raise ValueError(f"Not a valid choice: {part}")
        item = choices[int(part) - 1]
        if item not in picked:
            picked.append(item)
    # keep listing order
    return [c for c in choices if c in picked]


__all__ = ["Prompter", "ask_required", "require"]
