from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, FrozenSet, Optional


class Status(Enum):
    CHECKING = "checking"
    BUYING = "buying"
    BOUGHT = "bought"
    SELLING = "selling"
    SOLD = "sold"
    FAILURE = "failure"

    @property
    def is_terminal(self) -> bool:
        return self in (Status.SOLD, Status.FAILURE)


_NEXT: Dict[Status, FrozenSet[Status]] = {
    Status.CHECKING: frozenset({Status.BUYING, Status.FAILURE}),
    Status.BUYING: frozenset({Status.BOUGHT, Status.FAILURE}),
    Status.BOUGHT: frozenset({Status.SELLING, Status.FAILURE}),
    Status.SELLING: frozenset({Status.SOLD, Status.FAILURE}),
    Status.SOLD: frozenset(),
    Status.FAILURE: frozenset(),
}


class InvalidTransitionError(ValueError):
    pass


@dataclass(frozen=True)
class LiquidityPool:
    mint: str
    buy_price: float
    sell_price: float
    status: Status
    timestamp: Optional[float] = field(default=None, hash=False)

    def can_transition(self, status: Status) -> bool:
        return status in _NEXT[self.status]

    def transition(self, status: Status, timestamp: Optional[float] = None) -> "LiquidityPool":
        if not self.can_transition(status):
            raise InvalidTransitionError(f"{self.mint}: {self.status.value} -> {status.value} not allowed")
        return replace(self, status=status, timestamp=self.timestamp if timestamp is None else timestamp)
