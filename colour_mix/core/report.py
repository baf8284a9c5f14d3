"""Report builder — text and JSON output for a token rewrite."""

import json
from typing import Any

from colour_mix.core.types import RewriteReport


def format_text(report: RewriteReport) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.variant is None:
        lines.append(f'colour-mix: {report.token} — no variant matched')
        return '\n'.join(lines)

    lines.append(f'colour-mix: {report.token} — {report.variant} {report.mode} {report.weight}')
    lines.append(f'  remaining token: {report.remainder!r}')
    lines.append('')

    for entry in report.entries:
        mark = '✓' if entry['changed'] else '·'
        lines.append(f'{mark} {entry["property"]}: {entry["before"]}')
        if entry['changed']:
            lines.append(f'    → {entry["after"]}')
            if entry['preview']:
                lines.append(f'    ≈ {entry["preview"]}')

    lines.append('')
    total = report.changed_count + report.skipped_count
    lines.append(f'CHANGED {report.changed_count}/{total}  UNCHANGED {report.skipped_count}/{total}')
    return '\n'.join(lines)


def format_json(report: RewriteReport) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'token': report.token,
        'variant': report.variant,
    }
    if report.variant is not None:
        obj['operation'] = {'mode': report.mode, 'weight': report.weight}
        obj['remainder'] = report.remainder
    obj['entries'] = report.entries
    obj['summary'] = {
        'total': report.changed_count + report.skipped_count,
        'changed': report.changed_count,
        'unchanged': report.skipped_count,
    }
    return json.dumps(obj, indent=2)
