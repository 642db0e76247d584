from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'eggs'

# Note: incubation must be registered BEFORE empty prefix to avoid URL conflicts
router = DefaultRouter()
router.register(r'incubation', views.IncubationViewSet, basename='incubation')
router.register(r'', views.EggRecordViewSet, basename='egg')

urlpatterns = [
    # GET    /api/eggs/                       - List eggs (filters)
    # POST   /api/eggs/                       - Record egg
    # GET    /api/eggs/{id}/                  - Egg details
    # GET    /api/eggs/incubation/            - List incubations (?outcome=)
    # POST   /api/eggs/incubation/            - Set egg (owner)
    # PATCH  /api/eggs/incubation/{id}/       - Record outcome (owner)
    path('', include(router.urls)),
]
