import pytest

from nxdnkit import log, utils
from nxdnkit.log import LogLevel


@pytest.fixture
def display_log(tmp_path):
    log.initialise(str(tmp_path), "utils", 0, 1)
    yield
    log.finalise()
    log.initialise(str(tmp_path), "reset", 0, 2)


def test_hex_dump_short_line():
    assert utils.hex_dump_lines(b"AB") == ["0000:  41 42 " + "   " * 14 + "   *AB*"]


def test_hex_dump_non_printable_shown_as_dot():
    line = utils.hex_dump_lines(b"\x00A\x7f")[0]
    assert line.endswith("*.A.*")
    assert line.startswith("0000:  00 41 7F ")


def test_hex_dump_empty():
    assert utils.hex_dump_lines(b"") == []


def test_dump_logs_title_and_lines(display_log, capsys):
    utils.dump("Title", b"NXDN", LogLevel.DEBUG)
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert out[0].endswith(" Title")
    assert out[1].endswith("*NXDN*")


def test_dump_bits_packs_big_endian(display_log, capsys):
    utils.dump_bits("Bits", utils.byte_to_bits_be(0x41), LogLevel.DEBUG)
    out = capsys.readouterr().out.splitlines()
    assert out[1].endswith("*A*")


def test_byte_to_bits_be_msb_first():
    assert utils.byte_to_bits_be(0x80) == [True] + [False] * 7


def test_byte_to_bits_le_lsb_first():
    assert utils.byte_to_bits_le(0x01) == [True] + [False] * 7


@pytest.mark.parametrize("value", range(256))
def test_round_trips(value):
    assert utils.bits_to_byte_be(utils.byte_to_bits_be(value)) == value
    assert utils.bits_to_byte_le(utils.byte_to_bits_le(value)) == value
    assert utils.byte_to_bits_le(value) == list(reversed(utils.byte_to_bits_be(value)))


def test_invalid_inputs():
    with pytest.raises(ValueError):
        utils.byte_to_bits_be(256)
    with pytest.raises(ValueError):
        utils.bits_to_byte_be([True] * 7)