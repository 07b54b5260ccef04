# cultivation/urls.py

from rest_framework.routers import SimpleRouter

from .views import (
    CultivationCostViewSet,
    FertilizerScheduleViewSet,
    PlotActivityViewSet,
    PlotViewSet,
)

router = SimpleRouter(trailing_slash=False)
router.register("plots", PlotViewSet, basename="plot")
router.register("plot-activities", PlotActivityViewSet, basename="plot-activity")
router.register("cultivation-costs", CultivationCostViewSet, basename="cultivation-cost")
router.register(
    "fertilizer-schedules", FertilizerScheduleViewSet, basename="fertilizer-schedule"
)

urlpatterns = router.urls
