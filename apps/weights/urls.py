from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'weights'

router = DefaultRouter()
router.register(r'', views.WeightRecordViewSet, basename='weight')

urlpatterns = [
    # GET    /api/weights/            - List weights (?bird=, ?milestone=)
    # POST   /api/weights/            - Record weight
    # GET    /api/weights/{id}/       - Weight details
    # PUT    /api/weights/{id}/       - Update weight
    # DELETE /api/weights/{id}/       - Delete weight
    path('', include(router.urls)),
]
