"""Render a Country API response envelope as HTML.

Two strategies exist for the ``data`` payload of a successful envelope:

* ``json``  - the payload pretty-printed inside ``<pre>``
* ``table`` - a two-column key/value table, one row per top-level key

The strategy is picked by configuration (``RESPONSE_RENDER_MODE``); the
banner around it is shared. Failed envelopes never show ``data``.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any, Dict

from markupsafe import Markup

from domain.models.response_envelope import ResponseEnvelope
from middleware.errors import ConfigurationError

CANNOT_RENDER_TABLE = "Response data cannot be rendered as a table."


def _js_numbers(value: Any) -> Any:
    """Whole-number floats print as integers, the way JSON.stringify shows them."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    if isinstance(value, Mapping):
        return {key: _js_numbers(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_js_numbers(item) for item in value]
    return value


def _to_json(value: Any, indent: int | None = None) -> str:
    # default=str keeps odd payloads (dates, decimals) displayable
    return json.dumps(_js_numbers(value), indent=indent, ensure_ascii=False, default=str)


def format_cell(value: Any) -> str:
    """Stringify one table cell. Nested structures are not expanded."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list, tuple)):
        return _to_json(value)
    return str(_js_numbers(value))


class JsonDataRenderer:
    name = "json"

    def render(self, data: Any) -> Markup:
        return Markup("<pre>{}</pre>").format(_to_json(data, indent=2))


class TableDataRenderer:
    name = "table"

    def render(self, data: Any) -> Markup:
        if not isinstance(data, Mapping):
            return Markup('<p class="result-note">{}</p>').format(CANNOT_RENDER_TABLE)

        rows = [
            Markup("<tr><td>{}</td><td>{}</td></tr>").format(key, format_cell(value))
            for key, value in data.items()
        ]
        return (
            Markup('<table class="result-table">')
            + Markup("<thead><tr><th>Field</th><th>Value</th></tr></thead>")
            + Markup("<tbody>")
            + Markup("").join(rows)
            + Markup("</tbody></table>")
        )


RENDERERS: Dict[str, Any] = {
    JsonDataRenderer.name: JsonDataRenderer(),
    TableDataRenderer.name: TableDataRenderer(),
}


def get_data_renderer(mode: str):
    """Return the data renderer registered under ``mode``."""
    try:
        return RENDERERS[(mode or "").strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown response render mode: {mode!r}",
            details={"allowed": sorted(RENDERERS)},
        ) from None


def render_envelope(envelope: ResponseEnvelope, mode: str = TableDataRenderer.name) -> Markup:
    """Render the success or error banner for ``envelope``."""
    if envelope.if_success:
        body = get_data_renderer(mode).render(envelope.data)
        return Markup('<div class="result success">&#9989; {}<br>{}</div>').format(
            envelope.message or "", body
        )

    status = "" if envelope.status is None else envelope.status
    return Markup('<div class="result error">&#10060; {}<br>Status: {}</div>').format(
        envelope.message or "", status
    )
