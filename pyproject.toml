[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netdrills"
version = "0.1.0"
description = "Small exercises in data structures and UDP messaging: a linked list, chat buffers, and peer-to-peer UDP chat tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked-list", "udp", "chat", "circular-buffer", "queue", "sockets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Education",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netdrills-list-demo = "netdrills.list_demo:main"
netdrills-chat = "netdrills.chat:main"
netdrills-udp-chat = "netdrills.udp_chat:main"
netdrills-udp-client = "netdrills.udp_client:main"
netdrills-udp-server = "netdrills.udp_server:main"

[tool.hatch.build.targets.wheel]
packages = ["netdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
