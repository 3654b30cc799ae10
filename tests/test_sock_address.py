import socket

import pytest

from mspot.sock_address import AddressError, SockAddress


def test_ipv4_loopback_keyword():
    addr = SockAddress.from_family(socket.AF_INET, 17000, "LOCAL")
    assert addr.address == "127.0.0.1"
    assert addr.port == 17000
    assert addr.family == socket.AF_INET


def test_ipv4_any_keyword_is_zero():
    addr = SockAddress.from_family(socket.AF_INET, 0, "any")
    assert addr.address == "0.0.0.0"
    assert addr.address_is_zero()


def test_ipv6_keywords():
    loop = SockAddress.from_family(socket.AF_INET6, 1, "localhost")
    anyaddr = SockAddress.from_family(socket.AF_INET6, 1, "ANY")
    assert loop.address == "::1"
    assert not loop.address_is_zero()
    assert anyaddr.address == "::"
    assert anyaddr.address_is_zero()


def test_no_address_gives_wildcard():
    assert SockAddress.from_family(socket.AF_INET, 5).address_is_zero()


def test_numeric_address():
    addr = SockAddress.from_family(socket.AF_INET, 42, "10.1.2.3")
    assert addr.address == "10.1.2.3"
    assert not addr.address_is_zero()


@pytest.mark.parametrize(
    "family, text",
    [(socket.AF_INET, "999.1.1.1"), (socket.AF_INET6, "not-an-address")],
)
def test_invalid_numeric_address_raises(family, text):
    with pytest.raises(AddressError):
        SockAddress.from_family(family, 0, text)


def test_unsupported_family_raises():
    with pytest.raises(AddressError):
        SockAddress.from_family(socket.AF_UNSPEC, 0, "127.0.0.1")


def test_equality_ignores_port():
    a = SockAddress.from_family(socket.AF_INET, 1, "127.0.0.1")
    b = SockAddress.from_family(socket.AF_INET, 2, "127.0.0.1")
    assert a == b
    assert hash(a) == hash(b)


def test_inequality_on_address_and_family():
    a = SockAddress.from_family(socket.AF_INET, 1, "127.0.0.1")
    b = SockAddress.from_family(socket.AF_INET, 1, "127.0.0.2")
    c = SockAddress.from_family(socket.AF_INET6, 1, "::1")
    assert a != b
    assert a != c


def test_str_forms():
    v4 = SockAddress.from_family(socket.AF_INET, 17000, "127.0.0.1")
    v6 = SockAddress.from_family(socket.AF_INET6, 17000, "::1")
    no_port = SockAddress.from_family(socket.AF_INET, 0, "127.0.0.1")
    assert str(v4) == "127.0.0.1:17000"
    assert str(v6) == "[::1]:17000"
    assert str(no_port) == "127.0.0.1"


def test_sizes():
    v4 = SockAddress.from_family(socket.AF_INET)
    v6 = SockAddress.from_family(socket.AF_INET6)
    assert v4.size == 16
    assert v4.size < v6.size


def test_from_host_numeric():
    addr = SockAddress.from_host("127.0.0.1", 5000)
    assert addr.address == "127.0.0.1"
    assert addr.port == 5000
    assert addr.family == socket.AF_INET


def test_from_host_without_port():
    addr = SockAddress.from_host("127.0.0.1")
    assert addr.port == 0


def test_from_host_unknown_raises():
    with pytest.raises(AddressError):
        SockAddress.from_host("no-such-host.invalid", 1)


@pytest.mark.parametrize(
    "family, text", [(socket.AF_INET, "192.0.2.7"), (socket.AF_INET6, "2001:db8::7")]
)
def test_sockaddr_round_trip(family, text):
    addr = SockAddress.from_family(family, 4321, text)
    back = SockAddress.from_sockaddr(family, addr.to_sockaddr())
    assert back == addr
    assert back.port == addr.port
    assert back.address == text


def test_port_setter_validates():
    addr = SockAddress.from_family(socket.AF_INET)
    addr.port = 65535
    assert addr.port == 65535
    with pytest.raises(ValueError):
        addr.port = 70000


def test_bad_packed_length_raises():
    with pytest.raises(AddressError):
        SockAddress(socket.AF_INET, bytes(16))