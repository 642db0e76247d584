from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'feed'

router = DefaultRouter()
router.register(r'inventory', views.FeedInventoryViewSet, basename='inventory')
router.register(r'consumption', views.FeedConsumptionViewSet, basename='consumption')

urlpatterns = [
    # GET    /api/feed/inventory/             - List stock (?low_stock=true)
    # POST   /api/feed/inventory/             - Add stock (merges by type and brand)
    # PUT    /api/feed/inventory/{id}/        - Update stock row
    # DELETE /api/feed/inventory/{id}/        - Delete stock row
    # GET    /api/feed/consumption/           - List consumption (?coop=, ?date_from=, ?date_to=)
    # POST   /api/feed/consumption/           - Record consumption
    path('', include(router.urls)),
]
