import pytest

from nmapwrap.options_ports import (
    with_consecutive_port_scanning,
    with_fast_mode,
    with_most_common_ports,
    with_port_exclusions,
    with_port_ratio,
    with_ports,
)
from nmapwrap.scanner import Scanner, with_binary_path, with_custom_arguments


def _args(*options):
    return Scanner(with_binary_path("nmap"), *options).args


def test_ports_are_merged():
    assert _args(with_ports("554", "8554"), with_ports("80-81")) == ["-p", "554,8554,80-81"]


def test_ports_merge_with_existing_custom_flag():
    assert _args(with_custom_arguments("-p", "22"), with_ports("80")) == ["-p", "22,80"]


def test_ports_fill_dangling_flag():
    assert _args(with_custom_arguments("-p"), with_ports("80", "443")) == ["-p", "80,443"]


@pytest.mark.parametrize(
    ("option", "expected"),
    [
        (with_port_exclusions("554", "8554"), ["--exclude-ports", "554,8554"]),
        (with_fast_mode(), ["-F"]),
        (with_consecutive_port_scanning(), ["-r"]),
        (with_most_common_ports(5), ["--top-ports", "5"]),
        (with_port_ratio(0.42010101), ["--port-ratio", "0.4"]),
    ],
)
def test_port_arguments(option, expected):
    assert _args(option) == expected


@pytest.mark.parametrize("ratio", [2, -0.1])
def test_port_ratio_out_of_range(ratio):
    with pytest.raises(ValueError, match="between 0 and 1"):
        with_port_ratio(ratio)