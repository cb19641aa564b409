"""Instance identifiers for selections and cart lines.

Ids only need to be unique within one session, so a short slice of a
uuid4 is enough.  Services take the factory as a constructor argument so
tests can substitute a deterministic sequence.
"""

from __future__ import annotations

from typing import Callable
from uuid import uuid4

IdFactory = Callable[[], str]


def new_id() -> str:
    return uuid4().hex[:12]
