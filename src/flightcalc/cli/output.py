"""Fixed-format JSON rendering of calculator results.

Results print as a flat JSON object, one key per line, in record field
order. Floats use two-decimal fixed notation and booleans print as
``true``/``false``, so the layout is stable for scripts that read it::

    {
      "headwind": 15.00,
      "crosswind": 0.00,
      "is_descent": true
    }
"""

import json
from dataclasses import fields, is_dataclass
from typing import Any, Iterable


def record_items(*records: Any) -> list[tuple[str, float | bool]]:
    """Flatten result dataclasses into (name, value) pairs in field order.

    Args:
        *records: Dataclass instances, rendered one after the other.

    Returns:
        Ordered list of field names and values.

    Raises:
        TypeError: If a record is not a dataclass instance.
    """
    items: list[tuple[str, float | bool]] = []
    for record in records:
        if not is_dataclass(record) or isinstance(record, type):
            raise TypeError(f"Expected a result dataclass, got {type(record).__name__}")
        items.extend((f.name, getattr(record, f.name)) for f in fields(record))
    return items


def format_value(value: float | bool) -> str:
    """Format one value for the JSON output.

    Examples:
        >>> format_value(True)
        'true'
        >>> format_value(999.9)
        '999.90'
    """
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    return f"{float(value):.2f}"


def render_json(items: Iterable[tuple[str, float | bool]]) -> str:
    """Render (name, value) pairs as a pretty-printed JSON object.

    Args:
        items: Ordered field names and values.

    Returns:
        JSON text terminated by a newline.
    """
    lines = [f"  {json.dumps(name)}: {format_value(value)}" for name, value in items]
    return "{\n" + ",\n".join(lines) + "\n}\n"
