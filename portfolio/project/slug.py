# portfolio/project/slug.py

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def derive_slug(title: str) -> str:
    """Lowercase, collapse non-alphanumeric runs into '-', trim dashes at both ends."""
    return _NON_ALNUM.sub("-", title.lower()).strip("-")
