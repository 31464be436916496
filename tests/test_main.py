import io

import pytest

import main
from loopguard.collector import EOF_NOTICE, PROMPT
from loopguard.flawed import PROMPT as FLAWED_PROMPT


def test_run_shows_both_examples(feed, sink):
    main.run(3, feed("1", "2", "3", "4", "5", "6"), sink)

    assert sink.getvalue().splitlines() == [
        main.FLAWED_HEADER,
        "Matrix length: 3",
        FLAWED_PROMPT,
        FLAWED_PROMPT,
        FLAWED_PROMPT,
        "The value in 0 is 1.",
        "The value in 1 is 2.",
        "The value in 2 is 3.",
        "",
        main.CORRECTED_HEADER,
        PROMPT,
        PROMPT,
        PROMPT,
        "The value in 0 is 4.",
        "The value in 1 is 5.",
        "The value in 2 is 6.",
    ]


def test_run_reports_cancellation_instead_of_crashing(feed, sink):
    main.run(3, feed("1", "2", "3", "7", "cancel"), sink)

    lines = sink.getvalue().splitlines()
    assert lines[-1] == "Input cancelled: User requested cancellation."
    assert "The value in 0 is 7." not in lines


def test_run_on_empty_input(sink):
    main.run(3, io.StringIO(""), sink)

    lines = sink.getvalue().splitlines()
    assert lines[5:8] == [
        "The value in 0 is 0.",
        "The value in 1 is 0.",
        "The value in 2 is 0.",
    ]
    assert lines[-2:] == [EOF_NOTICE, "Input cancelled: End of input stream."]


def test_main_uses_process_streams(monkeypatch, capsys):
    monkeypatch.delenv("LOOPGUARD_LENGTH", raising=False)
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2\n3\n5\n\nabc\n7\n9\n"))

    assert main.main([]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[-3:] == [
        "The value in 0 is 5.",
        "The value in 1 is 7.",
        "The value in 2 is 9.",
    ]


def test_length_from_environment(monkeypatch):
    monkeypatch.setenv("LOOPGUARD_LENGTH", "2")
    assert main.parse_args([]).length == 2


def test_length_flag_overrides_environment(monkeypatch):
    monkeypatch.setenv("LOOPGUARD_LENGTH", "2")
    assert main.parse_args(["--length", "5"]).length == 5


def test_default_length(monkeypatch):
    monkeypatch.delenv("LOOPGUARD_LENGTH", raising=False)
    assert main.parse_args([]).length == 3


@pytest.mark.parametrize("raw", ["0", "-1", "three"])
def test_bad_length_is_a_usage_error(raw):
    with pytest.raises(SystemExit) as excinfo:
        main.parse_args(["--length", raw])
    assert excinfo.value.code == 2
