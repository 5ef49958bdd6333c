"""Tests for the print_card entry point."""

import io
import sys

from print_card import main

EXPECTED_OUTPUT = (
    "Happy Birthday, Odin One-Eye!\n"
    "From Asgard to Nifelheim, you're the best all-father ever.\n"
    "\n"
    "Love,\n"
    "Admiration, respect, and love, Thor\n"
    "Your son, Loki\n"
)


def test_main_prints_card(capsys):
    assert main() == 0

    captured = capsys.readouterr()
    assert captured.out == EXPECTED_OUTPUT
    assert "Error" not in captured.err


def test_main_reports_write_failure(capsys, monkeypatch):
    closed = io.StringIO()
    closed.close()
    monkeypatch.setattr(sys, "stdout", closed)

    assert main() == 1

    assert capsys.readouterr().err.startswith("Error: ")
