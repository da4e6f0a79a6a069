import importlib.util
from pathlib import Path

import pytest

from rotorlab.io.config_parser import (
    ConfigFormatError,
    is_setup_line,
    parse_config,
    parse_setup_line,
)
from rotorlab.io.formatting import format_message
from rotorlab.session import process_messages

from conftest import SMALL_CONFIG


def _load_cli():
    path = Path(__file__).parent.parent / "scripts" / "run_machine.py"
    spec = importlib.util.spec_from_file_location("run_machine", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


# ---------------------------------------------------------------------------
# Configuration files
# ---------------------------------------------------------------------------

def test_parse_small_config():
    spec = parse_config(SMALL_CONFIG, name="small")
    assert spec.name == "small"
    assert spec.alphabet == "ABCD"
    assert (spec.num_rotors, spec.num_pawls) == (3, 1)
    assert [(r.name, r.kind, r.notches) for r in spec.rotors] == [
        ("R1", "reflector", ""),
        ("F1", "fixed", ""),
        ("M1", "moving", "A"),
    ]
    assert spec.rotor("R1").cycles == "(AC) (BD)"
    assert spec.rotor("F1").cycles == ""


def test_cycles_may_continue_on_following_lines():
    text = """
    ABCDEF 2 1
    R1 R  (AB)
          (CD) (EF)
    M1 MAE (ABCDEF)
    """
    spec = parse_config(text)
    assert spec.rotor("R1").cycles == "(AB) (CD) (EF)"
    assert spec.rotor("M1").notches == "AE"


def test_moving_rotor_without_notches():
    spec = parse_config("ABCD 2 1 R1 R (AB) (CD) M1 M (ABCD)")
    assert spec.rotor("M1").kind == "moving"
    assert spec.rotor("M1").notches == ""


@pytest.mark.parametrize(
    "text",
    [
        "ABCD 3",                               # truncated
        "AB(D 2 1 R1 R (AB) (CD)",              # reserved character in alphabet
        "ABCD x 1",                             # non-integer count
        "ABCD 2 1 (AB) R1 R",                   # cycles before any rotor
        "ABCD 2 1 R1",                          # rotor with no type
        "ABCD 2 1 R1 Q (AB) (CD)",              # unknown type
        "ABCD 2 1 R1 RA (AB) (CD)",             # reflector with notches
        "ABCD 2 1 F1 NB",                       # fixed rotor with notches
        "ABCD 2 2 R1 R (AB) (CD) M1 M (ABCD)",  # pawls >= slots
        "ABCD 2 1 R1 R (AB) (CD) R1 MA (ABCD)", # duplicate name
    ],
)
def test_config_errors(text):
    with pytest.raises(ConfigFormatError):
        parse_config(text)


def test_setup_line():
    assert is_setup_line("  * R1 F1 M1 AA")
    assert not is_setup_line("HELLO")
    setup = parse_setup_line("* R1 F1 M1 AB (AC) (BD)", 3)
    assert setup.rotors == ["R1", "F1", "M1"]
    assert setup.setting == "AB"
    assert setup.plugboard == "(AC) (BD)"
    assert parse_setup_line("*R1 F1 M1 AB", 3).plugboard == ""


def test_setup_line_errors():
    with pytest.raises(ConfigFormatError):
        parse_setup_line("R1 F1 M1 AA", 3)
    with pytest.raises(ConfigFormatError):
        parse_setup_line("* R1 F1 M1", 3)


# ---------------------------------------------------------------------------
# Output formatting
# ---------------------------------------------------------------------------

def test_format_message():
    assert format_message("ABCDEFGHIJKL") == "ABCDE FGHIJ KL"
    assert format_message("ABCDEFGHIJ") == "ABCDE FGHIJ"
    assert format_message("ABCDEFG", 3) == "ABC DEF G"
    assert format_message("") == ""
    with pytest.raises(ValueError):
        format_message("ABC", 0)


# ---------------------------------------------------------------------------
# Message streams
# ---------------------------------------------------------------------------

def test_process_messages(small_spec):
    lines = ["* R1 F1 M1 AA", "A", "", "* R1 F1 M1 AA", "C"]
    assert process_messages(small_spec, lines) == ["C", "", "A"]


def test_spaces_in_messages_are_ignored(small_spec):
    spaced = process_messages(small_spec, ["* R1 F1 M1 AA", "AB CD AB"])
    packed = process_messages(small_spec, ["* R1 F1 M1 AA", "ABCDAB"])
    assert spaced == packed
    assert len(spaced[0].replace(" ", "")) == 6
    assert spaced[0][5] == " "


def test_setup_resets_plugboard(small_spec):
    lines = ["* R1 F1 M1 AA (AB)", "A", "* R1 F1 M1 AA", "A"]
    out = process_messages(small_spec, lines)
    assert len(out) == 2
    assert out[1] == "C"


def test_leading_blank_lines_are_skipped(small_spec):
    assert process_messages(small_spec, ["", "  ", "* R1 F1 M1 AA", "A"]) == ["C"]


def test_message_before_setup(small_spec):
    with pytest.raises(ConfigFormatError):
        process_messages(small_spec, ["A", "* R1 F1 M1 AA"])


def test_input_without_setup(small_spec):
    with pytest.raises(ConfigFormatError):
        process_messages(small_spec, [])


def test_historical_message_stream():
    from rotorlab.cipher.rotors_builtin import get_template

    spec = get_template("ENIGMA_I")
    out = process_messages(spec, ["* B I II III AAA", "AAAAA AAAAA"])
    assert out[0].startswith("BDZGO")


# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------

def test_cli_file_to_file(tmp_path):
    cli = _load_cli()
    conf = tmp_path / "small.conf"
    conf.write_text(SMALL_CONFIG, encoding="utf-8")
    msgs = tmp_path / "input.in"
    msgs.write_text("* R1 F1 M1 AA\nA\n\n* R1 F1 M1 AA\nC\n", encoding="utf-8")
    out = tmp_path / "output.out"

    assert cli.main([str(conf), str(msgs), str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "C\n\nA\n"


def test_cli_reports_errors(tmp_path, capsys):
    cli = _load_cli()
    conf = tmp_path / "bad.conf"
    conf.write_text("ABCD 3", encoding="utf-8")

    assert cli.main([str(conf), str(tmp_path / "missing.in")]) == 1
    assert "Error:" in capsys.readouterr().err
    assert cli.main([str(tmp_path / "missing.conf")]) == 1
