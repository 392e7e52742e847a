import logging

import pytest

from adplatform.access_log import format_access_line, level_for_status


@pytest.mark.parametrize("status", [500, 502, 503, 599])
def test_server_errors_are_errors(status):
    assert level_for_status(status) == logging.ERROR


@pytest.mark.parametrize("status", [200, 201, 204, 400, 404, 409, 415])
def test_other_statuses_are_debug(status):
    assert level_for_status(status) == logging.DEBUG


def test_format_line():
    assert (
        format_access_line("127.0.0.1", "GET /ads HTTP/1.1", 42, 200, 1.5)
        == '127.0.0.1 "GET /ads HTTP/1.1" 42 200 (took 1.500000 ms to serve)'
    )


def test_format_line_parts():
    line = format_access_line("10.0.0.2", "POST /time/advance HTTP/1.1", 0, 400, 0.25)
    assert line.startswith('10.0.0.2 "POST /time/advance HTTP/1.1" 0 400 ')
    assert line.endswith(" ms to serve)")