"""Record id generation.

Dashboard user ids are CUID2 strings; callers may also supply their own id
(upsert of an unknown id), so both share the same length limit.
"""

from cuid2 import cuid_wrapper

RECORD_ID_MAX_LENGTH = 64

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 for use as a primary key."""
    value = _next_cuid()
    if not isinstance(value, str) or not value:
        raise TypeError(f"cuid2 returned {value!r}, expected a non-empty str")
    return value
