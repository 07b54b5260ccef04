# storage/resources.py
"""
PATH: storage/resources.py

RESOURCE REGISTRY

Every record type the API persists is registered here once:
- name      : the storage key used by views/services ("plots", "journal_lines")
- model     : Django model label used by the database backend
- entity    : human label used in 404 messages ("Plot not found")
- ordering  : field lists are ordered by (creation order)
- timestamp : field stamped on create (None when the record has no timestamp)
- touch     : True when the timestamp is refreshed on every update
"""

from __future__ import annotations

from dataclasses import dataclass

from storage.exceptions import UnknownResourceError


@dataclass(frozen=True)
class Resource:
    name: str
    model: str
    entity: str
    timestamp: str | None = "created_at"
    ordering: str = "created_at"
    touch: bool = False


RESOURCES: dict[str, Resource] = {
    r.name: r
    for r in (
        # users & attendance
        Resource("users", "users.User", "User"),
        Resource(
            "admin_settings",
            "users.AdminSetting",
            "Setting",
            timestamp="updated_at",
            ordering="updated_at",
            touch=True,
        ),
        Resource("attendance", "attendance.AttendanceRecord", "Attendance record"),
        Resource("work_schedules", "attendance.WorkSchedule", "Work schedule"),
        Resource(
            "biometric_attendance",
            "attendance.BiometricAttendance",
            "Biometric record",
        ),
        Resource("wages", "attendance.Wage", "Wage record"),
        # cultivation
        Resource("plots", "cultivation.Plot", "Plot"),
        Resource("plot_activities", "cultivation.PlotActivity", "Plot activity"),
        Resource("cultivation_costs", "cultivation.CultivationCost", "Cultivation cost"),
        Resource(
            "fertilizer_schedules",
            "cultivation.FertilizerSchedule",
            "Fertilizer schedule",
        ),
        # inventory
        Resource("inventory_items", "inventory.InventoryItem", "Item"),
        Resource("inventory_movements", "inventory.InventoryMovement", "Movement"),
        # equipment
        Resource("equipment", "equipment.Equipment", "Equipment"),
        Resource(
            "maintenance_records",
            "equipment.MaintenanceRecord",
            "Maintenance record",
        ),
        Resource("fuel_logs", "equipment.FuelLog", "Fuel log"),
        # livestock
        Resource("animals", "livestock.Animal", "Animal"),
        Resource("milk_yields", "livestock.MilkYield", "Milk yield"),
        Resource("health_records", "livestock.HealthRecord", "Health record"),
        Resource("animal_sales", "livestock.AnimalSale", "Animal sale"),
        # finance
        Resource("accounts", "accounting.Account", "Account"),
        Resource("journal_entries", "accounting.JournalEntry", "Journal entry"),
        Resource(
            "journal_lines",
            "accounting.JournalLine",
            "Journal line",
            timestamp=None,
            ordering="line_number",
        ),
        Resource("petty_cash", "accounting.PettyCash", "Petty cash record"),
        # audit
        Resource(
            "audit_logs",
            "audit.AuditLog",
            "Audit log",
            timestamp="timestamp",
            ordering="timestamp",
        ),
    )
}


def get_resource(name: str) -> Resource:
    try:
        return RESOURCES[name]
    except KeyError as exc:
        raise UnknownResourceError(f"Unknown storage resource: {name!r}") from exc
