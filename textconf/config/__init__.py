"""Configuration documents: path-addressed nodes and JSON loading."""

from textconf.config.loader import dumps_json, load_json, loads_json, save_json
from textconf.config.node import ConfigNode

__all__ = [
    "ConfigNode",
    "dumps_json",
    "load_json",
    "loads_json",
    "save_json",
]
