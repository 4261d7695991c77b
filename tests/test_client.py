from unittest import mock

import pytest

from minitalk.client import SendError, main, parse_pid, send_message
from minitalk.protocol import MessageDecoder


@pytest.mark.parametrize("text, expected", [("1", 1), ("123", 123), ("0042", 42)])
def test_parse_pid_valid(text, expected):
    assert parse_pid(text) == expected


@pytest.mark.parametrize("text", ["", "0", "-5", "+5", "12a", " 12"])
def test_parse_pid_invalid(text):
    with pytest.raises(ValueError):
        parse_pid(text)


def _decode_calls(kill):
    decoder = MessageDecoder()
    results = [decoder.feed_signal(call.args[1]) for call in kill.call_args_list]
    return [r for r in results if r is not None]


@mock.patch("minitalk.client.time.sleep")
@mock.patch("minitalk.client.os.kill")
def test_send_message_round_trip(kill, sleep):
    send_message(4242, "hi there", delay=0)
    assert all(call.args[0] == 4242 for call in kill.call_args_list)
    assert kill.call_count == 8 * (len("hi there") + 1)
    assert sleep.call_count == kill.call_count
    assert _decode_calls(kill) == [b"hi there"]


@mock.patch("minitalk.client.time.sleep")
@mock.patch("minitalk.client.os.kill")
def test_send_empty_message_sends_terminator_only(kill, sleep):
    send_message(7, "")
    assert kill.call_count == 8
    assert _decode_calls(kill) == [b""]


@mock.patch("minitalk.client.time.sleep")
@mock.patch("minitalk.client.os.kill", side_effect=ProcessLookupError)
def test_send_failure_raises(kill, sleep):
    with pytest.raises(SendError):
        send_message(99999, "x")
    assert kill.call_count == 1


def test_main_wrong_argument_count(capsys):
    assert main(["123"]) == 0
    assert capsys.readouterr().err == "Wrong number of arguments\n"


def test_main_wrong_pid(capsys):
    assert main(["abc", "msg"]) == 0
    assert capsys.readouterr().err == "Wrong PID\n"


@mock.patch("minitalk.client.time.sleep")
@mock.patch("minitalk.client.os.kill", side_effect=ProcessLookupError)
def test_main_send_failure(kill, sleep, capsys):
    assert main(["123", "msg"]) == 1
    assert "Failure when trying to send signal" in capsys.readouterr().err


@mock.patch("minitalk.client.time.sleep")
@mock.patch("minitalk.client.os.kill")
def test_main_success(kill, sleep):
    assert main(["321", "ok"]) == 0
    assert _decode_calls(kill) == [b"ok"]