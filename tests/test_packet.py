import pytest

from mspot.packet import IPFRAMESIZE, LSD_SIZE, IPFrame, Lsd, RefPacket


def _sample_frame() -> IPFrame:
    lsd = Lsd(dst=b"\x01" * 6, src=bytes(range(6)), frame_type=0x0005, meta=b"m" * 14)
    return IPFrame(
        magic=b"M17 ",
        stream_id=0x1234,
        lsd=lsd,
        frame_number=0x8001,
        payload=bytes(range(16)),
        crc=0xBEEF,
    )


def test_frame_size_matches_wire_format():
    assert len(_sample_frame().to_bytes()) == IPFRAMESIZE


def test_frame_round_trip():
    frame = _sample_frame()
    assert IPFrame.from_bytes(frame.to_bytes()) == frame


def test_frame_fields_are_big_endian():
    raw = _sample_frame().to_bytes()
    assert raw[:4] == b"M17 "
    assert raw[4:6] == (0x1234).to_bytes(2, "big")
    assert raw[-2:] == (0xBEEF).to_bytes(2, "big")
    assert raw[34:36] == (0x8001).to_bytes(2, "big")


def test_lsd_round_trip_and_size():
    lsd = _sample_frame().lsd
    raw = lsd.to_bytes()
    assert len(raw) == LSD_SIZE
    assert Lsd.from_bytes(raw) == lsd
    assert raw[12:14] == (0x0005).to_bytes(2, "big")


def test_frame_from_wrong_length_raises():
    with pytest.raises(ValueError):
        IPFrame.from_bytes(bytes(IPFRAMESIZE - 1))


def test_lsd_rejects_bad_address_length():
    with pytest.raises(ValueError):
        Lsd(dst=bytes(5))


def test_frame_rejects_out_of_range_stream_id():
    with pytest.raises(ValueError):
        IPFrame(stream_id=0x10000)


def test_frame_set_out_of_range_raises_on_encode():
    frame = _sample_frame()
    frame.crc = -1
    with pytest.raises(ValueError):
        frame.to_bytes()


@pytest.mark.parametrize(
    "packet",
    [
        RefPacket(b"PING"),
        RefPacket(b"DISC", bytes(range(6))),
        RefPacket(b"CONN", bytes(range(6)), "A"),
    ],
)
def test_ref_packet_round_trip(packet):
    assert RefPacket.from_bytes(packet.to_bytes()) == packet


def test_ref_packet_lengths():
    assert len(RefPacket(b"PING").to_bytes()) == 4
    assert len(RefPacket(b"DISC", bytes(6)).to_bytes()) == 10
    assert len(RefPacket(b"CONN", bytes(6), "C").to_bytes()) == 11


def test_ref_packet_module_decoded():
    raw = b"CONN" + bytes(6) + b"B"
    assert RefPacket.from_bytes(raw).module == "B"


def test_ref_packet_bad_length_raises():
    with pytest.raises(ValueError):
        RefPacket.from_bytes(b"CONNX")


def test_ref_packet_module_without_callsign_raises():
    with pytest.raises(ValueError):
        RefPacket(b"CONN", b"", "A")