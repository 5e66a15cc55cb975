[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nmapwrap"
version = "0.1.0"
description = "Compose nmap command lines from typed options and parse nmap interface listings."
requires-python = ">=3.10"
dependencies = []
keywords = ["nmap", "network", "scanner", "command-line", "interfaces"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nmapwrap"]

[tool.pytest.ini_options]
addopts = "-ra"
