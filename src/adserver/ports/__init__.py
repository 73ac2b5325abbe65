"""Port interfaces (Protocols).

Application services depend only on these, never on concrete adapters.
"""

from .clock import Clock, SystemClock
from .id_gen import ImpressionTokenProvider, UuidImpressionTokenProvider

__all__ = [
    "Clock",
    "ImpressionTokenProvider",
    "SystemClock",
    "UuidImpressionTokenProvider",
]
