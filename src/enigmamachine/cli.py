from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from enigmamachine.core.catalog import list_reflectors, list_rotors
from enigmamachine.core.common import split_rotor_order
from enigmamachine.core.utils import group_text, normalize_az, strip_separators
from enigmamachine.machine.enigma import EnigmaMachine

app = typer.Typer(help="Enigma CLI: three-rotor army Enigma (M3) simulator.")


def _configure_logging(verbose: bool):
    """Set up the package logger for one command; returns a callable that undoes it."""
    root = logging.getLogger("enigmamachine")
    prior_level = root.level
    added: Optional[RichHandler] = None

    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        added = RichHandler(console=Console(stderr=True), show_path=False, show_time=False, markup=False)
        root.addHandler(added)

    def restore() -> None:
        root.setLevel(prior_level)
        if added is not None:
            root.removeHandler(added)

    return restore


@app.callback()
def _init(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log settings and rotor events to stderr."),
):
    ctx.call_on_close(_configure_logging(verbose))


def _build_machine(
    rotors: str,
    key: str,
    reflector: str,
    ring: str,
    plugboard: str,
    skip_plugboard_check: bool,
) -> EnigmaMachine:
    try:
        order = split_rotor_order(rotors)
        return EnigmaMachine(
            order,
            key,
            reflector=reflector,
            ring=ring,
            plugboard=strip_separators(plugboard),
            skip_plugboard_validation=skip_plugboard_check,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))


def _run(
    text: str,
    rotors: str,
    key: str,
    reflector: str,
    ring: str,
    plugboard: str,
    skip_plugboard_check: bool,
    groups: int,
    *,
    lowercase: bool,
) -> None:
    machine = _build_machine(rotors, key, reflector, ring, plugboard, skip_plugboard_check)

    # The machine only has 26 keys; everything else is dropped before it gets there
    letters = normalize_az(text)
    if not letters:
        typer.echo("No letters A-Z in input; nothing to do.", err=True)
        raise typer.Exit(code=1)

    out = machine.decrypt(letters) if lowercase else machine.encrypt(letters)
    typer.echo(group_text(out, groups) if groups > 0 else out)


_ROTORS_OPT = typer.Option(..., "--rotors", "-r", envvar="ENIGMA_ROTORS", help="Rotor order, left to right (e.g. 1,2,3).")
_KEY_OPT = typer.Option(..., "--key", "-k", envvar="ENIGMA_KEY", help="Starting rotor positions (e.g. ABC).")
_REFLECTOR_OPT = typer.Option("B", "--reflector", envvar="ENIGMA_REFLECTOR", help="A, B, C or a 26-letter wiring.")
_RING_OPT = typer.Option("AAA", "--ring", envvar="ENIGMA_RING", help="Ring settings (e.g. AAA).")
_PLUGBOARD_OPT = typer.Option(
    "", "--plugboard", "-p", envvar="ENIGMA_PLUGBOARD", help="Stecker pairs, e.g. 'AB CD EF'."
)
_SKIP_OPT = typer.Option(False, "--skip-plugboard-check", help="Allow a letter in more than one stecker pair.")
_GROUPS_OPT = typer.Option(0, "--groups", "-g", help="If >0, print output in groups of this many letters.")


@app.command()
def encrypt(
    text: str = typer.Argument(..., help="Plaintext. Non-letters are dropped."),
    rotors: str = _ROTORS_OPT,
    key: str = _KEY_OPT,
    reflector: str = _REFLECTOR_OPT,
    ring: str = _RING_OPT,
    plugboard: str = _PLUGBOARD_OPT,
    skip_plugboard_check: bool = _SKIP_OPT,
    groups: int = _GROUPS_OPT,
):
    """Encrypt text (output in uppercase)."""
    _run(text, rotors, key, reflector, ring, plugboard, skip_plugboard_check, groups, lowercase=False)


@app.command()
def decrypt(
    text: str = typer.Argument(..., help="Ciphertext. Non-letters (e.g. group spaces) are dropped."),
    rotors: str = _ROTORS_OPT,
    key: str = _KEY_OPT,
    reflector: str = _REFLECTOR_OPT,
    ring: str = _RING_OPT,
    plugboard: str = _PLUGBOARD_OPT,
    skip_plugboard_check: bool = _SKIP_OPT,
    groups: int = _GROUPS_OPT,
):
    """Decrypt text with the same settings used to encrypt it (output in lowercase)."""
    _run(text, rotors, key, reflector, ring, plugboard, skip_plugboard_check, groups, lowercase=True)


@app.command()
def catalog(
    rotor: Optional[int] = typer.Option(None, "--rotor", help="Show only this rotor (1-5)."),
):
    """List the rotor wheels and reflectors the machine can be fitted with."""
    rotors = list_rotors()
    if rotor is not None:
        rotors = [r for r in rotors if r.index == rotor]
        if not rotors:
            raise typer.BadParameter(f"No rotor {rotor}. Available: 1-{len(list_rotors())}.")

    for r in rotors:
        typer.echo(f"{r.index}  {r.name:<3}  {r.wiring}  turnover={r.turnover}")

    if rotor is None:
        typer.echo("")
        for name, wiring in list_reflectors():
            typer.echo(f"UKW-{name}    {wiring}")


def main():
    app()


if __name__ == "__main__":
    main()
