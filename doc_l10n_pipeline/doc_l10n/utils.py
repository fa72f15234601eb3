import re
from html import escape

class Markup(str):
    """A string that already holds serialized HTML and must not be wrapped again."""
    __slots__ = ()

MARKUP_OPEN_RE = re.compile(r"^\s*<")

def is_markup(value) -> bool:
    if isinstance(value, Markup):
        return True
    # strings rendered elsewhere (e.g. by a caller) carry no flag
    return isinstance(value, str) and bool(MARKUP_OPEN_RE.match(value))

def escape_text(s: str) -> str:
    return escape(s, quote=False)

def escape_attr(s) -> str:
    return escape(str(s), quote=True)

SAFE_NAME_RE = re.compile(r"[^A-Za-z0-9._-]+")

def safe_filename(name: str, fallback: str = "document") -> str:
    cleaned = SAFE_NAME_RE.sub("_", name or "").strip("._")
    return cleaned or fallback
