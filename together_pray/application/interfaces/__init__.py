"""Application interfaces (ports): repository protocols.

Define contracts for persistence implementations (DIP).
No runtime imports from together_pray.infrastructure.
"""

from together_pray.application.interfaces.repositories import (
    IGroupRepository,
    IPrayerItemRepository,
)

__all__ = [
    "IGroupRepository",
    "IPrayerItemRepository",
]
