# storefront/utils/ids.py
import re

# ASCII digits only: int() would also take "1_0" and non-ASCII digits
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_id(raw: str | int | None) -> int | None:
    """Path segment -> int, or None when it is not a whole number."""
    if isinstance(raw, int):
        return raw
    if raw is None:
        return None
    raw = raw.strip()
    if not _INTEGER.fullmatch(raw):
        return None
    return int(raw)
