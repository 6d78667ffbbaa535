"""Fault path construction.

Paths are derived from the traversal position only:

    this                  root
    this.name             property
    this[0]               element
    this.entries[0]       map entry
    this.keys[0]          map key
    this[key]             map value
"""
from typing import Any


def property_path(path: str, name: str) -> str:
    return f"{path}.{name}"


def index_path(path: str, index: int) -> str:
    return f"{path}[{index}]"


def entry_path(path: str, index: int) -> str:
    return f"{path}.entries[{index}]"


def key_path(path: str, index: int) -> str:
    return f"{path}.keys[{index}]"


def keyed_path(path: str, key: Any) -> str:
    return f"{path}[{key}]"
