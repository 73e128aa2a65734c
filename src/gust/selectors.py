"""CSS identifier escaping and selector assembly."""

from __future__ import annotations

import functools


@functools.lru_cache(maxsize=4096)
def escape_identifier(name: str) -> str:
    """Serialize *name* as a CSS identifier (CSSOM ``CSS.escape`` rules).

    ``top-[4px]`` -> ``top-\\[4px\\]``, ``md:p-4`` -> ``md\\:p-4``,
    ``2xl:p-4`` -> ``\\32 xl\\:p-4``.
    """
    out: list[str] = []
    for i, ch in enumerate(name):
        code = ord(ch)
        if code == 0:
            out.append("\ufffd")
        elif 0x01 <= code <= 0x1F or code == 0x7F:
            out.append(f"\\{code:x} ")
        elif ch.isdigit() and ch.isascii() and (i == 0 or (i == 1 and name[0] == "-")):
            out.append(f"\\{code:x} ")
        elif i == 0 and ch == "-" and len(name) == 1:
            out.append("\\-")
        elif code >= 0x80 or ch in "-_" or (ch.isascii() and ch.isalnum()):
            out.append(ch)
        else:
            out.append("\\" + ch)
    return "".join(out)


def class_selector(raw: str) -> str:
    return "." + escape_identifier(raw)


def apply_template(template: str, selector: str) -> str:
    """Substitute *selector* for every ``&`` in a variant *template*."""
    return template.replace("&", selector)
