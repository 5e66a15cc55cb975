import pytest

from nmapwrap.options_service import (
    with_service_info,
    with_version_all,
    with_version_intensity,
    with_version_light,
    with_version_trace,
)
from nmapwrap.scanner import Scanner, with_binary_path


def _args(*options):
    return Scanner(with_binary_path("nmap"), *options).args


@pytest.mark.parametrize(
    ("option", "expected"),
    [
        (with_service_info(), ["-sV"]),
        (with_version_intensity(1), ["--version-intensity", "1"]),
        (with_version_light(), ["--version-light"]),
        (with_version_all(), ["--version-all"]),
        (with_version_trace(), ["--version-trace"]),
    ],
)
def test_service_arguments(option, expected):
    assert _args(option) == expected


@pytest.mark.parametrize("intensity", [42, -1, 10])
def test_version_intensity_out_of_range(intensity):
    with pytest.raises(ValueError, match="between 0 and 9"):
        with_version_intensity(intensity)


@pytest.mark.parametrize("intensity", [0, 9])
def test_version_intensity_bounds(intensity):
    assert _args(with_version_intensity(intensity)) == ["--version-intensity", str(intensity)]