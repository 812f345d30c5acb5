import time

import pytest

from nxdnkit import log
from nxdnkit.nxcore import (
    ICOM_LENGTH,
    NXCoreNetwork,
    build_icom_packet,
    parse_icom_packet,
)
from nxdnkit.udpsocket import UDPSocketError


@pytest.fixture(autouse=True)
def quiet_log(tmp_path):
    log.initialise(str(tmp_path), "nxcore", 0, 0)
    yield
    log.finalise()


def _frame(flags: int) -> bytes:
    payload = bytes(range(1, 34))
    return b"NXDND" + b"\x00\x10" + b"\x27\x0f" + bytes([flags]) + payload


def test_packet_header_and_payload():
    frame = _frame(0x01)
    packet = build_icom_packet(frame)
    assert len(packet) == ICOM_LENGTH
    assert packet[:8] == b"ICOM\x01\x01\x08\xe0"
    assert packet[40:73] == frame[10:43]
    assert packet[73:] == bytes(ICOM_LENGTH - 73)
    assert packet[8:37] == bytes(29)


def test_voice_header_marker():
    packet = build_icom_packet(_frame(0x05))
    assert packet[37:40] == bytes([0x23, 0x1C, 0x21])


def test_voice_body_marker():
    packet = build_icom_packet(_frame(0x01))
    assert packet[37:40] == bytes([0x23, 0x10, 0x21])


def test_data_marker():
    packet = build_icom_packet(_frame(0x02 | 0x08))
    assert packet[37:40] == bytes([0x23, 0x02, 0x18])


def test_short_frame_rejected():
    with pytest.raises(ValueError):
        build_icom_packet(b"NXDND" + bytes(10))


def test_round_trip():
    frame = _frame(0x09)
    assert parse_icom_packet(build_icom_packet(frame)) == frame[10:43]


def test_parse_rejects_bad_magic():
    packet = bytearray(build_icom_packet(_frame(0x01)))
    packet[0:4] = b"XCOM"
    assert parse_icom_packet(bytes(packet)) is None


def test_parse_rejects_wrong_length():
    packet = build_icom_packet(_frame(0x01))
    assert parse_icom_packet(packet[:-1]) is None
    assert parse_icom_packet(packet + b"\x00") is None


def test_open_fails_for_unknown_host():
    network = NXCoreNetwork("nonexistent.invalid", False)
    with pytest.raises(UDPSocketError):
        network.open()


def test_write_without_open_fails():
    network = NXCoreNetwork("127.0.0.1", False)
    assert network.write(_frame(0x01)) is False


def test_loopback_round_trip():
    network = NXCoreNetwork("127.0.0.1", True)
    network.open()
    try:
        frame = _frame(0x05)
        assert network.write(frame) is True
        received = b""
        deadline = time.monotonic() + 2.0
        while not received and time.monotonic() < deadline:
            received = network.read()
            if not received:
                time.sleep(0.01)
        assert received == frame[10:43]
        assert network.read() == b""
    finally:
        network.close()