from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'breeds'

# Note: source-farms must be registered BEFORE empty prefix to avoid URL conflicts
router = DefaultRouter()
router.register(r'source-farms', views.SourceFarmViewSet, basename='source-farm')
router.register(r'', views.BreedViewSet, basename='breed')

urlpatterns = [
    # GET    /api/breeds/                     - List breeds
    # POST   /api/breeds/                     - Create breed (owner)
    # GET    /api/breeds/{id}/                - Breed details
    # PUT    /api/breeds/{id}/                - Update breed (owner)
    # DELETE /api/breeds/{id}/                - Delete unused breed (owner)
    # GET    /api/breeds/source-farms/        - List source farms
    path('', include(router.urls)),
]
