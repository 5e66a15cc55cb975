# nmapwrap

Build `nmap` command lines from small, named option functions. Parse the
interface and route tables that `nmap --iflist` prints.

The `nmap` binary must be installed. By default it is looked up on `PATH`.
Use `with_binary_path` to point at a specific executable instead.

## Installation

```
pip install .
```

## Building a scanner

Each `with_*` function returns an option. An option is a callable that
changes a `Scanner`, usually by appending to its `args` list. You pass
options to `Scanner`, and you can add more later with
`Scanner.add_options`, which returns the scanner.

```python
from nmapwrap.scanner import Scanner
from nmapwrap.options_targets import with_targets
from nmapwrap.options_ports import with_ports
from nmapwrap.options_service import with_service_info

scanner = Scanner(
    with_targets("localhost"),
    with_ports("80", "443"),
    with_service_info(),
)
print(scanner.args)         # ['localhost', '-p', '80,443', '-sV']
print(scanner.binary_path)  # path of the nmap executable
```

If no binary path is set by an option and `nmap` is not on `PATH`, creating a
`Scanner` raises `NmapNotInstalledError`.

`with_custom_arguments` appends raw arguments as they are. Use it for any
flag that has no option function.

Calls to `with_ports` accumulate. Two calls produce a single `-p` argument
that holds both port lists, for example `-p 554,8554,80-81`.

Options that take a bounded value raise `ValueError` when the value is out of
range. The check happens when the option is created.

- `with_ip_time_to_live` accepts 0 to 255.
- `with_source_port` accepts 0 to 65535.
- `with_verbosity` and `with_debugging` accept 0 to 10.
- `with_version_intensity` accepts 0 to 9.
- `with_port_ratio` accepts 0 to 1. The ratio is written with one decimal,
  so 0.42 becomes `0.4`.

`with_script_timeout` takes a `datetime.timedelta` or a number of seconds and
writes the timeout in milliseconds, for example `--script-timeout 40000ms`.
`with_script_arguments` takes a mapping. A key whose value is the empty
string is passed as a bare flag.

## Listing interfaces

`Scanner.interface_list` runs the configured binary with the scanner's
arguments followed by `--iflist` and parses what it prints:

```python
listing = Scanner().interface_list()
for iface in listing.interfaces:
    print(iface.device, iface.ip, iface.ip_mask, iface.up, iface.mtu)
for route in listing.routes:
    print(route.device, route.destination_ip, route.metric, route.gateway)
```

If nmap exits with a non-zero status, `interface_list` raises
`subprocess.CalledProcessError`.

`nmapwrap.iflist` parses `--iflist` text that you already have:

- `parse_interfaces(content)` accepts `bytes` or `str` and returns an
  `InterfaceList` with `interfaces` and `routes` lists.
- `convert_interface(line)` returns an `Interface`, or `None` for a line with
  fewer than six fields.
- `convert_route(line)` returns a `Route`, or `None` for a line with fewer
  than three fields.

Addresses and masks are `ipaddress` objects. A MAC address is `bytes`. A
field that cannot be parsed is left at its default: `None` for addresses, `0`
for numbers.

## Errors

`nmapwrap.errors` defines `NmapError` and these subclasses:

- `NmapNotInstalledError`
- `ScanTimeoutError`
- `ScanInterruptError`
- `MallocFailedError`
- `ParseOutputError`
- `RequiresRootError`
- `ResolveNameError`

Each one has a default message. Each also has a `warnings` list for the
non-critical messages collected before the error.

`check_stderr(stderr)` in `nmapwrap.scanner` splits nmap's stderr into
trimmed warning lines and returns them. It raises `MallocFailedError` for a
line containing `Malloc Failed!`. It raises `RequiresRootError` for a line
containing `requires root privileges.`. In both cases the exception's
`warnings` holds the lines read up to that point.

## Option modules

| Module | Covers |
| --- | --- |
| `scanner` | `with_custom_arguments`, `with_binary_path` |
| `options_targets` | targets, exclusions, input files, random targets, unique |
| `options_discovery` | host discovery probes, DNS settings, traceroute |
| `options_ports` | port lists, exclusions, fast mode, top ports, port ratio |
| `options_service` | service and version detection |
| `options_scripts` | script scanning, script arguments, script timeout |
| `options_os` | OS detection |
| `options_firewall` | fragmentation, MTU, decoys, spoofing, proxies, payloads, TTL |
| `options_output` | verbosity, debugging, reasons, stylesheets, resume |
| `options_misc` | IPv6, aggressive scans, data dir, privilege hints, output files |

## What this package does not do

- It does not run a port scan or return scan results. `Scanner` builds the
  argument list and runs only `--iflist`. Nothing here parses nmap's XML
  report, reports progress, streams output or filters hosts and ports.
- `ScanTimeoutError`, `ScanInterruptError`, `ParseOutputError` and
  `ResolveNameError` are defined, but no code in the package raises them.
- There are no option functions for scan techniques (SYN, UDP, idle scans and
  so on) or for timing templates. Pass such flags with
  `with_custom_arguments`.
- There is no command-line program.