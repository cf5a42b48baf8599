"""Exporters for converting word tables to various output formats."""

from .lines_exporter import to_lines
from .ascii_exporter import to_ascii
from .json_exporter import to_json
from .yaml_exporter import to_yaml

__all__ = ["to_lines", "to_ascii", "to_json", "to_yaml"]
