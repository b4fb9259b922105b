import os

import pytest

from ftkit.talk import client_main, server_main


def test_client_reports_message_length(capsys):
    status = client_main(["1234", "hello"])
    out = capsys.readouterr().out
    assert status == 0
    assert out == "Info sent: 5\n"


def test_client_counts_encoded_bytes(capsys):
    message = "caf\u00e9"
    status = client_main(["42", message])
    out = capsys.readouterr().out
    assert status == 0
    assert out == f"Info sent: {len(os.fsencode(message))}\n"


def test_client_empty_message_fails_silently(capsys):
    status = client_main(["1234", ""])
    assert status == 1
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "argv",
    [[], ["1234"], ["1234", "hi", "extra"]],
)
def test_client_wrong_argument_count(capsys, argv):
    assert client_main(argv) == 1
    assert capsys.readouterr().out == ""


def test_server_prints_pid(capsys):
    status = server_main([])
    out = capsys.readouterr().out
    assert status == 0
    assert out == f"Server PID: {os.getpid()}\n"


def test_server_ignores_arguments(capsys):
    assert server_main(["anything", "else"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Server PID: ")
    assert out.endswith("\n")
    assert int(out[len("Server PID: "):-1]) == os.getpid()