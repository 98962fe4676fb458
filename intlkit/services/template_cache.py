"""Compile message templates and cache them per locale entry.

Templates use ``<%= name %>`` for interpolation and ``<%- name %>`` for
HTML-escaped interpolation. Names may be dotted paths into nested mappings or
attributes (``<%= user.name %>``). Missing and ``None`` values render as an
empty string. Anything between ``<%`` and ``%>`` that is not a name path is
kept as literal text. ES-style ``${name}`` interpolation is not supported and
stays in the output as written.
"""

import html
import logging
import re
from collections.abc import Mapping

from intlkit.i18n import CompiledTemplate, LocaleEntry

_log = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r"<%([=-])\s*(.+?)\s*%>", re.DOTALL)
_NAME_PATH_RE = re.compile(r"^[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*$")

_MISSING = object()


def _lookup(values: Mapping, path: list[str]):
    current = values
    for part in path:
        if isinstance(current, Mapping):
            current = current.get(part, _MISSING)
        else:
            current = getattr(current, part, _MISSING)
        if current is _MISSING:
            return _MISSING
    return current


def compile_template(message: str) -> CompiledTemplate:
    """Compile ``message`` into a function of a values mapping."""
    # Literal chunks are str, placeholders are (escape, path, source) tuples.
    parts: list[str | tuple[bool, list[str], str]] = []
    pos = 0
    for m in _PLACEHOLDER_RE.finditer(message):
        expr = m.group(2)
        if not _NAME_PATH_RE.match(expr):
            continue
        if m.start() > pos:
            parts.append(message[pos : m.start()])
        parts.append((m.group(1) == "-", expr.split("."), m.group(0)))
        pos = m.end()
    if pos < len(message):
        parts.append(message[pos:])

    def render(values: Mapping) -> str:
        out = []
        for part in parts:
            if isinstance(part, str):
                out.append(part)
                continue
            escape, path, source = part
            value = _lookup(values, path)
            if value is _MISSING:
                _log.debug("Template value for %s is missing", source)
                continue
            if value is None:
                continue
            text = str(value)
            out.append(html.escape(text) if escape else text)
        return "".join(out)

    return render


def get_template(entry: LocaleEntry, key: str, message: str) -> CompiledTemplate:
    """Return the compiled template of ``key`` in ``entry``, compiling it once.

    Cached templates are never evicted; the message data of an entry is
    immutable so a cached template can not go stale.
    """
    compiled = entry.template.get(key)
    if compiled is None:
        compiled = compile_template(message)
        entry.template[key] = compiled
    return compiled
