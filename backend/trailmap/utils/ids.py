"""
TrailMap Identifier Helpers
"""


def unique_id(base: str, seen: set[str]) -> str:
    """
    Return `base`, or `base-2`, `base-3`, ... if already taken.
    The chosen id is added to `seen`.
    """
    candidate = base
    n = 2
    while candidate in seen:
        candidate = f"{base}-{n}"
        n += 1
    seen.add(candidate)
    return candidate
