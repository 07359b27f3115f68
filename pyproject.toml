[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tftpclient"
version = "0.1.0"
description = "Interactive menu-driven client for a simple TFTP-style file transfer server over UDP"
requires-python = ">=3.10"
dependencies = []
keywords = ["tftp", "udp", "file-transfer", "client"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: File Transfer Protocol (FTP)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tftpclient = "tftpclient.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tftpclient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
