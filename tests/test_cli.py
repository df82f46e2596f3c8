import logging

import pytest
from typer.testing import CliRunner

from enigmamachine.cli import app

runner = CliRunner()


def _invoke(*args, env=None):
    return runner.invoke(app, list(args), env=env)


def test_encrypt_known_answer():
    result = _invoke("encrypt", "AAA", "--rotors", "1,2,3", "--key", "ABC")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "CXT"


@pytest.mark.parametrize("rotors", ["1,2,3", "1 2 3", "1:2:3", "123"])
def test_rotor_order_formats(rotors):
    result = _invoke("encrypt", "AAA", "-r", rotors, "-k", "ABC")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "CXT"


def test_encrypt_sanitises_input():
    result = _invoke("encrypt", "a a, a!", "-r", "123", "-k", "abc")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "CXT"


def test_decrypt_lowercase_and_roundtrip():
    args = ["-r", "5,1,3", "-k", "XQD", "--ring", "BCD", "--reflector", "C", "-p", "AB CD EF"]
    enc = _invoke("encrypt", "Attack at dawn", *args, "--groups", "5")
    assert enc.exit_code == 0, enc.output
    grouped = enc.output.strip()
    assert all(len(g) <= 5 for g in grouped.split(" "))

    dec = _invoke("decrypt", grouped, *args)
    assert dec.exit_code == 0, dec.output
    assert dec.output.strip() == "attackatdawn"


def test_settings_from_environment():
    env = {"ENIGMA_ROTORS": "1,2,3", "ENIGMA_KEY": "ABC"}
    result = _invoke("encrypt", "AAA", env=env)
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "CXT"


@pytest.mark.parametrize(
    "extra",
    [
        ["-r", "1,1,2", "-k", "AAA"],
        ["-r", "1,2,3", "-k", "AAA", "--ring", "AA"],
        ["-r", "1,2,3", "-k", "AAA", "-p", "ABA"],
        ["-r", "1,2,9", "-k", "AAA"],
        ["-r", "one,two,three", "-k", "AAA"],
        ["-r", "1,2,3", "-k", "AAA", "--reflector", "Q"],
    ],
)
def test_bad_settings_exit_with_usage_error(extra):
    result = _invoke("encrypt", "HELLO", *extra)
    assert result.exit_code == 2


def test_skip_plugboard_check_flag():
    result = _invoke("encrypt", "HELLO", "-r", "123", "-k", "AAA", "-p", "ABAC", "--skip-plugboard-check")
    assert result.exit_code == 0, result.output


def test_no_letters_in_input():
    result = _invoke("encrypt", "1234 !!", "-r", "123", "-k", "AAA")
    assert result.exit_code == 1


def test_catalog_lists_rotors_and_reflectors():
    result = _invoke("catalog")
    assert result.exit_code == 0, result.output
    assert "EKMFLGDQVZNTOWYHXUSPAIBRCJ" in result.output
    assert "turnover=Q" in result.output
    assert "UKW-B" in result.output


def test_catalog_single_rotor():
    result = _invoke("catalog", "--rotor", "3")
    assert result.exit_code == 0, result.output
    assert result.output.startswith("3  III")
    assert "UKW" not in result.output

    assert _invoke("catalog", "--rotor", "9").exit_code == 2


def test_verbose_flag_accepted():
    result = _invoke("-v", "encrypt", "AAA", "-r", "123", "-k", "ABC")
    assert result.exit_code == 0, result.output
    assert "CXT" in result.output


def test_verbose_logging_is_undone_after_the_command():
    logger = logging.getLogger("enigmamachine")
    level, handlers = logger.level, list(logger.handlers)

    assert _invoke("-v", "encrypt", "AAA", "-r", "123", "-k", "ABC").exit_code == 0
    assert logger.level == level
    assert logger.handlers == handlers

    # a rejected setting exits through the same path
    assert _invoke("-v", "encrypt", "AAA", "-r", "113", "-k", "ABC").exit_code == 2
    assert logger.level == level
    assert logger.handlers == handlers
