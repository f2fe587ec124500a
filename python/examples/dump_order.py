from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from ampy_dump import get_logger, init, serialize, shutdown

@dataclass
class Fill:
    qty: int
    price: float

@dataclass
class Order:
    symbol: str
    side: str
    submitted_at: datetime
    tags: List[str] = field(default_factory=list)
    fills: List[Fill] = field(default_factory=list)
    parent: Optional["Order"] = None

def main():
    init(mode="pretty", validate_output=True)
    order = Order("AAPL", "buy", datetime.now(timezone.utc), tags=["algo", "dev"],
                  fills=[Fill(50, 189.2), Fill(50, 189.25)])
    order.parent = order  # self-reference is dropped from the dump
    print(serialize(order))

    init(mode="compact", enable_logs=True)
    get_logger().info("order submitted", order=serialize(order))
    shutdown()

if __name__ == "__main__":
    main()
