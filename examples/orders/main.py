"""
Minimal run: build two snapshots separately and compare them.
To run: python examples/orders/main.py
Inspect a class: memberwise describe domain:OrderSnapshot (from examples/orders)
"""
import sys
import time
from pathlib import Path

# example lives in examples/orders
sys.path.insert(0, str(Path(__file__).resolve().parent))

from memberwise import by_properties, comparer_for
from domain import Money, OrderLine, OrderSnapshot, ShippingAddress


def snapshot(note: str) -> OrderSnapshot:
    return OrderSnapshot(
        customer_id="c-42",
        lines=(
            OrderLine("SKU-1", 2, Money(1250, "EUR")),
            OrderLine("SKU-7", 1, Money(399, "EUR")),
        ),
        ship_to=ShippingAddress("Baker Street", "London", note=note),
        captured_at=time.time(),
    )


first = snapshot("leave at door")
second = snapshot("ring twice")

print("equal:", first == second)
print("same hash:", hash(first) == hash(second))
print("distinct in a set:", len({first, second}))
print("members:", [m.name for m in comparer_for(OrderSnapshot).members])
print("properties comparer:", by_properties(OrderSnapshot))
