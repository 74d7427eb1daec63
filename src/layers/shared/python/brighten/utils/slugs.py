"""URL slug helpers."""

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """Derive a URL-safe slug from a title.

    Lowercases, collapses every run of characters outside ``[a-z0-9]`` into a
    single hyphen and trims hyphens from both ends.

    >>> slugify("My New Service!!")
    'my-new-service'
    """
    return _NON_ALNUM.sub("-", title.lower()).strip("-")
