# storage/seed.py
"""
PATH: storage/seed.py

DEMO DATA

Seeds, through whichever backend is configured:
- demo users (admin/admin, manager/manager, five field staff with "password")
- today's attendance for the field staff
- the farm chart of accounts (all balances start at zero)

Idempotent: nothing is written when user "admin" already exists.
"""

from __future__ import annotations

import logging
from datetime import time
from decimal import Decimal

from django.utils import timezone

logger = logging.getLogger(__name__)


DEMO_USERS = [
    ("admin", "admin", "Admin User", "Admin", "admin@farm.com", None),
    ("manager", "manager", "Farm Manager", "Manager", "manager@farm.com", None),
    ("rajesh", "password", "Rajesh Kumar", "Supervisor", "rajesh@farm.com", "+91 98765 43210"),
    ("priya", "password", "Priya Sharma", "Operator", "priya@farm.com", "+91 98765 43211"),
    ("arun", "password", "Arun Patel", "Operator", "arun@farm.com", "+91 98765 43212"),
    ("meena", "password", "Meena Devi", "Operator", "meena@farm.com", "+91 98765 43213"),
    ("suresh", "password", "Suresh Babu", "Operator", "suresh@farm.com", "+91 98765 43214"),
]

# (username, status, check_in, check_out, work_hours)
DEMO_ATTENDANCE = [
    ("rajesh", "Present", time(8, 45), time(17, 30), Decimal("8.75")),
    ("priya", "Present", time(9, 0), time(17, 45), Decimal("8.75")),
    ("arun", "Late", time(9, 30), None, None),
    ("meena", "Absent", None, None, Decimal("0")),
    ("suresh", "Present", time(8, 30), time(17, 15), Decimal("8.75")),
]

FARM_CHART = [
    ("1000", "Cash", "Asset"),
    ("1100", "Bank Account", "Asset"),
    ("1200", "Farm Inputs Inventory", "Asset"),
    ("1500", "Livestock", "Asset"),
    ("1600", "Equipment & Machinery", "Asset"),
    ("2000", "Accounts Payable", "Liability"),
    ("2100", "Wages Payable", "Liability"),
    ("3000", "Owner's Capital", "Equity"),
    ("4000", "Milk Sales Revenue", "Revenue"),
    ("4100", "Banana Sales Revenue", "Revenue"),
    ("4200", "Livestock Sales", "Revenue"),
    ("5000", "Labour Expense", "Expense"),
    ("5100", "Fertilizer Expense", "Expense"),
    ("5200", "Fuel Expense", "Expense"),
    ("5300", "Veterinary Expense", "Expense"),
    ("5400", "Equipment Maintenance", "Expense"),
]


def seed_demo_data(storage) -> dict[str, int] | None:
    """
    Seed demo records into `storage`.

    Returns counts of what was created, or None when the store was already seeded.
    """
    if storage.find("users", username="admin") is not None:
        logger.info("Demo data already present; seeding skipped")
        return None

    users = {}
    for username, password, full_name, role, email, phone in DEMO_USERS:
        users[username] = storage.create_user(
            {
                "username": username,
                "password": password,
                "full_name": full_name,
                "role": role,
                "email": email,
                "phone": phone,
                "is_active": True,
            }
        )

    today = timezone.localdate()
    for username, status, check_in, check_out, work_hours in DEMO_ATTENDANCE:
        storage.create(
            "attendance",
            {
                "user_id": users[username]["id"],
                "date": today,
                "status": status,
                "check_in": check_in,
                "check_out": check_out,
                "work_hours": work_hours,
                "notes": None,
                "biometric_data": None,
            },
        )

    for code, name, account_type in FARM_CHART:
        storage.create(
            "accounts",
            {
                "account_code": code,
                "account_name": name,
                "account_type": account_type,
                "parent_account_id": None,
                "balance": Decimal("0.00"),
                "is_active": True,
            },
        )

    counts = {
        "users": len(DEMO_USERS),
        "attendance": len(DEMO_ATTENDANCE),
        "accounts": len(FARM_CHART),
    }
    logger.info("Seeded demo data into %s storage: %s", storage.backend_name, counts)
    return counts
