# inventory/urls.py

from rest_framework.routers import SimpleRouter

from .views import InventoryItemViewSet, InventoryMovementViewSet

router = SimpleRouter(trailing_slash=False)
router.register("inventory", InventoryItemViewSet, basename="inventory-item")
router.register("inventory-movements", InventoryMovementViewSet, basename="inventory-movement")

urlpatterns = router.urls
