from datetime import datetime, timedelta, timezone

import pytest

from wins.grpclog import CallKind, code_to_level, format_call_log

METHOD = "/wins.ProcessService/Start"


def test_unary_success_line():
    line = format_call_log(CallKind.UNARY, METHOD, timedelta(0), "OK")
    assert line == "[GRPC - Unary ] { OK }, wins.ProcessService - Start, cost 0s"


def test_stream_header():
    line = format_call_log(CallKind.STREAM, METHOD, timedelta(0), "Internal", "boom")
    assert line.startswith("[GRPC - Stream] { Internal },")


def test_error_message_appended_last():
    line = format_call_log(CallKind.UNARY, METHOD, timedelta(0), "InvalidArgument", "invalid path")
    assert line.endswith(": invalid path")


def test_no_message_means_no_colon_suffix():
    line = format_call_log(CallKind.UNARY, METHOD, timedelta(0), "OK")
    assert ": " not in line


def test_service_and_method_split():
    line = format_call_log(CallKind.UNARY, "/pkg.Service/Call", timedelta(0), "OK")
    assert " pkg.Service - Call," in line


def test_millisecond_duration():
    line = format_call_log(CallKind.UNARY, METHOD, timedelta(microseconds=1500), "OK")
    assert line.endswith("cost 1.5ms")


def test_deadline_in_utc():
    deadline = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    line = format_call_log(CallKind.UNARY, METHOD, timedelta(0), "OK", None, deadline)
    assert ", request deadline 2024-01-02T03:04:05Z" in line


def test_deadline_comes_before_message():
    deadline = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    line = format_call_log(CallKind.UNARY, METHOD, timedelta(0), "Unknown", "failure", deadline)
    assert line.index("request deadline") < line.index(": failure")


def test_longer_duration_has_minutes_and_seconds():
    line = format_call_log(CallKind.UNARY, METHOD, timedelta(seconds=90), "OK")
    cost = line.rsplit("cost ", 1)[1]
    assert "m" in cost and cost.endswith("s") and "h" not in cost


@pytest.mark.parametrize("code", ["Nonsense", "Code(99)"])
def test_unknown_codes_log_like_unknown(code):
    assert code_to_level(code) == code_to_level("Unknown")


def test_levels_are_ordered_by_severity():
    assert code_to_level("Internal") > code_to_level("DeadlineExceeded") > code_to_level("OK")


def test_client_errors_log_like_success():
    assert code_to_level("InvalidArgument") == code_to_level("OK")
    assert code_to_level("NotFound") == code_to_level("OK")