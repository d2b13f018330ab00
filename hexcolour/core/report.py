"""Report builder — text and JSON output for hexcolour results."""

import json
from typing import Any

from hexcolour.core.types import Report


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.meta:
        for key, value in report.meta.items():
            lines.append(f'{key}: {value}')
        lines.append('')

    width = max((len(row['label']) for row in report.rows), default=0)
    for row in report.rows:
        extras = [f'{k}={v}' for k, v in row.items() if k not in ('label', 'hex')]
        line = f'{row["label"]:<{width}}  {row["hex"]}'
        if extras:
            line += '  ' + '  '.join(extras)
        lines.append(line.rstrip())

    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'command': report.command}
    obj.update(report.meta)
    obj['colours'] = report.rows
    return json.dumps(obj, indent=2)
