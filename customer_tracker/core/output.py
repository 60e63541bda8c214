"""
Output formatters for console display.

Rows print as ``column : value`` lines, the layout used by every view in the
menu. The non-interactive CLI also supports JSON.
"""

import json
import sqlite3
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence

NULL_MARKER = "NULL"


class OutputFormat(str, Enum):
    HUMAN = "human"
    JSON = "json"


def format_value(value: Any) -> str:
    return NULL_MARKER if value is None else str(value)


def format_pairs(columns: Sequence[str], values: Sequence[Any]) -> str:
    """One ``column : value`` line per column."""
    return "\n".join(f"{col} : {format_value(val)}" for col, val in zip(columns, values))


def format_row(row: sqlite3.Row) -> str:
    return format_pairs(row.keys(), tuple(row))


def rows_to_dicts(rows: Iterable[sqlite3.Row]) -> List[Dict[str, Any]]:
    return [dict(r) for r in rows]


def format_result(
    result: Dict[str, Any],
    fmt: OutputFormat = OutputFormat.HUMAN,
    title: Optional[str] = None,
) -> str:
    """Format a customer record (plus nested address list) for display."""
    if fmt == OutputFormat.JSON:
        return json.dumps(result, indent=2, default=str)
    return _format_human(result, title)


def _format_human(result: Dict[str, Any], title: Optional[str] = None) -> str:
    lines = []
    if title:
        lines.extend([title, "=" * len(title), ""])

    for key, value in result.items():
        if isinstance(value, list):
            lines.append("")
            lines.append(f"{key.replace('_', ' ').title()} ({len(value)}):")
            for item in value:
                lines.append(format_pairs(list(item.keys()), list(item.values())))
                lines.append("")
        else:
            lines.append(f"{key} : {format_value(value)}")

    return "\n".join(lines).rstrip("\n")
