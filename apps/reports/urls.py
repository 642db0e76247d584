from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'reports'

router = DefaultRouter()
router.register(r'presets', views.ReportPresetViewSet, basename='preset')

urlpatterns = [
    # Report builder
    path('columns/', views.report_columns, name='columns'),
    path('values/', views.report_values, name='values'),
    path('execute/', views.report_execute, name='execute'),
    path('summary/', views.report_summary, name='summary'),
    path('export/', views.report_export, name='export'),

    # Flat data exports (birds, weights, eggs, vaccinations, health-incidents)
    path('export/<str:export_type>/', views.flat_export, name='flat-export'),

    # Dashboard
    path('dashboard/', views.dashboard, name='dashboard'),

    # GET    /api/reports/presets/        - My presets (?type=)
    # POST   /api/reports/presets/        - Save preset
    # PUT    /api/reports/presets/{id}/   - Update preset
    # DELETE /api/reports/presets/{id}/   - Delete preset
    path('', include(router.urls)),
]
