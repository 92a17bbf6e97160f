from __future__ import annotations

import json
import math

import pytest

from gelfsend.core.encoder import FRAME_TERMINATOR, GELFMessage, encode
from gelfsend.core.errors import EncodingError

_BASE_FIELDS = {"version", "host", "short_message", "full_message", "timestamp", "level"}


def _decode(payload: bytes) -> dict:
    assert payload.endswith(b"\x0a\x00")
    return json.loads(payload[: -len(FRAME_TERMINATOR)].decode("utf-8"))


def test_encode_lays_out_base_and_additional_fields() -> None:
    message = GELFMessage(
        host="host1",
        short_message="disk full",
        full_message="volume /data at 98%",
        timestamp=1700000000,
        level=3,
        extra={"volume": "/data", "usage": 0.98},
    )

    data = _decode(encode(message))

    assert set(data) == _BASE_FIELDS | {"_volume", "_usage"}
    assert data == {
        "version": "1.1",
        "host": "host1",
        "short_message": "disk full",
        "full_message": "volume /data at 98%",
        "timestamp": 1700000000,
        "level": 3,
        "_volume": "/data",
        "_usage": 0.98,
    }


def test_zero_values_are_kept() -> None:
    data = _decode(encode(GELFMessage(host="", short_message="ping")))

    assert data["full_message"] == ""
    assert data["timestamp"] == 0
    assert data["level"] == 0
    assert set(data) == _BASE_FIELDS


def test_reserved_key_collision_is_prefixed() -> None:
    message = GELFMessage(host="real-host", short_message="hi", extra={"host": "other", "level": 9})

    data = _decode(encode(message))

    assert data["host"] == "real-host"
    assert data["level"] == 0
    assert data["_host"] == "other"
    assert data["_level"] == 9


def test_unicode_is_utf8_encoded() -> None:
    payload = encode(GELFMessage(host="h", short_message="température élevée"))

    assert "température élevée".encode("utf-8") in payload
    assert _decode(payload)["short_message"] == "température élevée"


@pytest.mark.parametrize(
    "value",
    [object(), {1, 2}, math.nan, math.inf],
    ids=["object", "set", "nan", "inf"],
)
def test_unrepresentable_extra_raises(value: object) -> None:
    with pytest.raises(EncodingError):
        encode(GELFMessage(host="h", short_message="bad", extra={"value": value}))


def test_cyclic_extra_raises() -> None:
    cyclic: dict = {}
    cyclic["self"] = cyclic

    with pytest.raises(EncodingError) as excinfo:
        encode(GELFMessage(host="h", short_message="loop", extra={"cycle": cyclic}))

    assert isinstance(excinfo.value, ValueError)
