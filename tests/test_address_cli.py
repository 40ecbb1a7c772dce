import pytest

from cli.address_cli import main

KNOWN_ID = "399812073269533888"
KNOWN_ADDRESS = "BURST-B982-YTG4-ZS2F-2C55D"


def test_encode(capsys):
    assert main(["encode", KNOWN_ID, "0"]) == 0
    assert capsys.readouterr().out.splitlines() == [KNOWN_ADDRESS, "BURST-2222-2222-2222-22222"]


def test_encode_rejects_bad_ids(capsys):
    assert main(["encode", "-1", "abc", KNOWN_ID]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [KNOWN_ADDRESS]
    assert captured.err.count("[!]") == 2


def test_decode(capsys):
    assert main(["decode", KNOWN_ADDRESS]) == 0
    assert capsys.readouterr().out.strip() == KNOWN_ID


def test_decode_reports_failures(capsys):
    assert main(["decode", KNOWN_ADDRESS + "2", KNOWN_ADDRESS[:-1]]) == 1
    err = capsys.readouterr().err
    assert "Too many symbols" in err
    assert "Invalid address" in err


def test_check(capsys):
    assert main(["check", KNOWN_ADDRESS, "BURST-B982-YTG4-ZS2F-2C55E"]) == 1
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("OK")
    assert lines[0].endswith(KNOWN_ID)
    assert lines[1].startswith("INVALID")


def test_strict_flag(capsys):
    spaced = "BURST-B982 YTG4-ZS2F-2C55D"
    assert main(["check", "--no-strict", spaced]) == 0
    assert main(["check", "--strict", spaced]) == 1
    capsys.readouterr()


def test_prefix_option(capsys):
    assert main(["--prefix", "S-", "encode", KNOWN_ID]) == 0
    assert capsys.readouterr().out.strip() == "S-B982-YTG4-ZS2F-2C55D"


def test_command_required():
    with pytest.raises(SystemExit):
        main([])
