import pytest

from nmapwrap.options_firewall import (
    with_ascii_data,
    with_bad_sum,
    with_data_length,
    with_decoys,
    with_fragment_packets,
    with_hex_data,
    with_interface,
    with_ip_options,
    with_ip_time_to_live,
    with_mtu,
    with_proxies,
    with_source_port,
    with_spoof_ip_address,
    with_spoof_mac,
)
from nmapwrap.scanner import Scanner, with_binary_path


def _args(*options):
    return Scanner(with_binary_path("/opt/fake/nmap"), *options).args


@pytest.mark.parametrize(
    "option, expected",
    [
        (lambda: with_fragment_packets(), ["-f"]),
        (lambda: with_mtu(42), ["--mtu", "42"]),
        (
            lambda: with_decoys(
                "192.168.1.1",
                "192.168.1.2",
                "192.168.1.3",
                "192.168.1.4",
                "192.168.1.5",
                "192.168.1.6",
                "ME",
                "192.168.1.8",
            ),
            [
                "-D",
                "192.168.1.1,192.168.1.2,192.168.1.3,192.168.1.4,"
                "192.168.1.5,192.168.1.6,ME,192.168.1.8",
            ],
        ),
        (lambda: with_spoof_ip_address("192.168.1.1"), ["-S", "192.168.1.1"]),
        (lambda: with_interface("eth0"), ["-e", "eth0"]),
        (lambda: with_source_port(65535), ["--source-port", "65535"]),
        (lambda: with_proxies("4242", "8484"), ["--proxies", "4242,8484"]),
        (lambda: with_hex_data("0x8b6c42"), ["--data", "0x8b6c42"]),
        (lambda: with_ascii_data("pale brownish"), ["--data-string", "pale brownish"]),
        (lambda: with_data_length(42), ["--data-length", "42"]),
        (
            lambda: with_ip_options("S 192.168.1.1 10.0.0.3"),
            ["--ip-options", "S 192.168.1.1 10.0.0.3"],
        ),
        (lambda: with_ip_time_to_live(254), ["--ttl", "254"]),
        (lambda: with_spoof_mac("02:00:00:00:00:01"), ["--spoof-mac", "02:00:00:00:00:01"]),
        (lambda: with_bad_sum(), ["--badsum"]),
    ],
)
def test_firewall_options(option, expected):
    assert _args(option()) == expected


def test_invalid_ttl_raises():
    with pytest.raises(ValueError, match=r"should be between 0 and 255"):
        _args(with_ip_time_to_live(-254))


def test_ttl_above_range_raises():
    with pytest.raises(ValueError, match=r"should be between 0 and 255"):
        _args(with_ip_time_to_live(256))


def test_invalid_source_port_raises():
    with pytest.raises(ValueError):
        _args(with_source_port(70000))


def test_options_accumulate_in_order():
    assert _args(with_fragment_packets(), with_mtu(8)) == ["-f", "--mtu", "8"]