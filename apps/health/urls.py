from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'health'

router = DefaultRouter()
router.register(r'incidents', views.HealthIncidentViewSet, basename='incident')
router.register(r'vaccinations', views.VaccinationViewSet, basename='vaccination')
router.register(r'medications', views.MedicationViewSet, basename='medication')

urlpatterns = [
    # GET    /api/health/summary/                 - Health overview
    path('summary/', views.health_summary, name='summary'),

    # GET    /api/health/incidents/               - List incidents (?bird=, ?outcome=)
    # POST   /api/health/incidents/               - Report incident
    # GET    /api/health/vaccinations/            - List vaccinations (?bird=, ?upcoming=true)
    # POST   /api/health/vaccinations/            - Record vaccination
    # GET    /api/health/medications/             - List medications (?bird=, ?active=true)
    # POST   /api/health/medications/             - Record medication
    path('', include(router.urls)),
]
