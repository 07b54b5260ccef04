# equipment/urls.py

from rest_framework.routers import SimpleRouter

from .views import EquipmentViewSet, FuelLogViewSet, MaintenanceRecordViewSet

router = SimpleRouter(trailing_slash=False)
router.register("equipment", EquipmentViewSet, basename="equipment")
router.register("maintenance-records", MaintenanceRecordViewSet, basename="maintenance-record")
router.register("fuel-logs", FuelLogViewSet, basename="fuel-log")

urlpatterns = router.urls
