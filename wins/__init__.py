"""Parsing, validation, configuration and logging helpers for operating a Windows host from a container."""

__version__ = "0.1.0"

__all__ = [
    "cmds",
    "config",
    "exposes",
    "grpclog",
    "listvalue",
    "outputs",
    "requests",
    "whitelist",
]