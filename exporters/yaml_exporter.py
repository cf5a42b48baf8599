"""YAML exporter for word tables."""

import yaml

from model.table import WordTable
from .json_exporter import build_payload


def to_yaml(table: WordTable, include_spans: bool = True) -> str:
    """
    Convert a word table to YAML format.

    Uses the same structure as the JSON exporter, with keys kept in order.
    """
    return yaml.safe_dump(
        build_payload(table, include_spans),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
