from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'farm_settings'

router = DefaultRouter()
router.register(r'bird-colors', views.BirdColorViewSet, basename='bird-color')
router.register(r'egg-sizes', views.EggSizeCategoryViewSet, basename='egg-size')
router.register(r'feed-stages', views.FeedStageViewSet, basename='feed-stage')

urlpatterns = [
    # GET/POST          /api/settings/bird-colors/               - Colours (?breeds=id,id sorts by usage)
    # GET/PUT/DELETE    /api/settings/bird-colors/{id}/          - Colour (delete refused while in use)
    # GET/POST          /api/settings/egg-sizes/                 - Egg size categories
    # GET               /api/settings/egg-sizes/classify/        - Category for ?weight=
    # GET/POST          /api/settings/feed-stages/               - Feed stages (?feed_type=)
    # Writes are owner-only
    path('', include(router.urls)),
]
