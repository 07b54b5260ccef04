# livestock/urls.py

from rest_framework.routers import SimpleRouter

from .views import AnimalSaleViewSet, AnimalViewSet, HealthRecordViewSet, MilkYieldViewSet

router = SimpleRouter(trailing_slash=False)
router.register("animals", AnimalViewSet, basename="animal")
router.register("milk-yields", MilkYieldViewSet, basename="milk-yield")
router.register("health-records", HealthRecordViewSet, basename="health-record")
router.register("animal-sales", AnimalSaleViewSet, basename="animal-sale")

urlpatterns = router.urls
