import io

import pytest

from webrouting.http_utils import consume, join


def test_join_default_delimiter():
    assert join(["a", "b", "c"]) == "a b c"


def test_join_with_trailing_delimiter():
    assert join(["a", "b"], ",", True) == "a,b,"


def test_join_converts_values_to_strings():
    assert join([1, 2, 3], "-") == "1-2-3"


@pytest.mark.parametrize("trailing", [False, True])
def test_join_empty_list(trailing):
    assert join([], ",", trailing) == ""


def test_join_single_value_without_trailing():
    assert join(["only"], ";") == "only"


def test_join_round_trips_with_split():
    values = ["x", "y", "z"]
    assert join(values, "|").split("|") == values


def test_consume_counts_all_bytes():
    data = b"0123456789" * 20000
    stream = io.BytesIO(data)
    assert consume(stream) == len(data)
    assert stream.read() == b""


def test_consume_empty_stream():
    assert consume(io.BytesIO(b"")) == 0


def test_consume_text_stream():
    assert consume(io.StringIO("hello")) == len("hello")