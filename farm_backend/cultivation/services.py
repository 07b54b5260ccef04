# cultivation/services.py

from __future__ import annotations

import math
from decimal import Decimal

from storage.records import money, to_decimal


def total_plants(area, plant_density) -> int:
    """Plants on a plot: area (ha) x density (plants/ha), rounded down."""
    return math.floor(to_decimal(area) * Decimal(plant_density or 0))


def plot_summary(*, storage, plot: dict) -> dict:
    costs = storage.list("cultivation_costs", filters={"plot_id": plot["id"]})
    activities = storage.list("plot_activities", filters={"plot_id": plot["id"]})

    return {
        "plot_id": plot["id"],
        "total_plants": total_plants(plot.get("area"), plot.get("plant_density")),
        "total_cost": money(sum((to_decimal(c.get("amount")) for c in costs), Decimal("0"))),
        "activity_count": len(activities),
    }
