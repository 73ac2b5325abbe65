"""Port: impression token generation."""

from __future__ import annotations

import uuid
from typing import Protocol, runtime_checkable


@runtime_checkable
class ImpressionTokenProvider(Protocol):
    """Generate an unguessable, unique impression token."""

    def new_token(self) -> str: ...


# ---------------------------------------------------------------------------
# Default implementation (pure stdlib, no infra deps)
# ---------------------------------------------------------------------------


class UuidImpressionTokenProvider:
    """Uses uuid4 (os.urandom backed) for impression tokens."""

    def new_token(self) -> str:
        return str(uuid.uuid4())
