# accounting/api/urls.py

from rest_framework.routers import SimpleRouter

# Import the view modules directly to avoid circular imports through views/__init__.py.
from accounting.api.views.accounts import AccountViewSet
from accounting.api.views.journal_entries import JournalEntryViewSet
from accounting.api.views.petty_cash import PettyCashViewSet

router = SimpleRouter(trailing_slash=False)
router.register("accounts", AccountViewSet, basename="account")
router.register("journal-entries", JournalEntryViewSet, basename="journal-entry")
router.register("petty-cash", PettyCashViewSet, basename="petty-cash")

urlpatterns = router.urls
