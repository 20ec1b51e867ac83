# aeplib/cases.py
import re

_KEBAB_RE = re.compile(r"-([a-z])")


def kebab_to_camel_case(value: str) -> str:
    """Fold "-x" into "X": "my-widgets" becomes "myWidgets"."""
    return _KEBAB_RE.sub(lambda match: match.group(1).upper(), value)


def lower_first(value: str) -> str:
    return value[:1].lower() + value[1:]