# storage/management/commands/seed_farm.py

from __future__ import annotations

from django.core.management.base import BaseCommand

from storage import get_storage
from storage.seed import seed_demo_data


class Command(BaseCommand):
    help = "Seed demo users, today's attendance and the farm chart of accounts (idempotent)."

    def handle(self, *args, **options):
        storage = get_storage()
        created = seed_demo_data(storage)

        if not created:
            self.stdout.write(
                self.style.WARNING(
                    f"Demo data already present in {storage.backend_name} storage; nothing to do."
                )
            )
            return

        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {storage.backend_name} storage: "
                f"{created['users']} users, {created['attendance']} attendance rows, "
                f"{created['accounts']} accounts."
            )
        )
