from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'coops'

router = DefaultRouter()
router.register(r'', views.CoopViewSet, basename='coop')

urlpatterns = [
    # GET    /api/coops/                 - List coops with occupancy
    # POST   /api/coops/                 - Create coop
    # GET    /api/coops/{id}/            - Coop details
    # PUT    /api/coops/{id}/            - Update coop
    # DELETE /api/coops/{id}/            - Delete empty coop
    # GET    /api/coops/{id}/birds/      - Current residents
    path('', include(router.urls)),
]
