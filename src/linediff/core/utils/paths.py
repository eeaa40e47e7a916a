"""Path label normalization for diff headers"""

import os
import re


_leading_re = re.compile(r"^(\./)+|^/+")


def normalize_rel_path(path: str) -> str:
    """Use '/' separators and strip leading './' and '/' so labels are stable across OSes."""
    p = str(path or "").replace(os.sep, "/")
    while True:
        stripped = _leading_re.sub("", p)
        if stripped == p:
            return p
        p = stripped
