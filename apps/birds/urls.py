from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'birds'

router = DefaultRouter()
router.register(r'', views.BirdViewSet, basename='bird')

urlpatterns = [
    # Bird ViewSet routes
    # GET    /api/birds/                      - List birds (filters, limit/offset)
    # POST   /api/birds/                      - Create bird (owner)
    # GET    /api/birds/{id}/                 - Bird details
    # PUT    /api/birds/{id}/                 - Update bird (owner)
    # PATCH  /api/birds/{id}/                 - Partial update (owner)
    # DELETE /api/birds/{id}/                 - Archive bird (owner)

    # Custom bird actions
    # GET    /api/birds/{id}/offspring/       - Chicks of this bird
    # GET    /api/birds/{id}/notes/           - Notes
    # POST   /api/birds/{id}/notes/           - Add note (any staff)
    # GET    /api/birds/{id}/breeds/          - Breed composition
    # PUT    /api/birds/{id}/breeds/          - Replace composition (owner)
    # GET    /api/birds/{id}/coop-history/    - Coop placement history
    # POST   /api/birds/breed-composition/    - Preview composition from parents
    # POST   /api/birds/bulk/                 - Bulk move/status/archive (owner)
    # GET    /api/birds/lookup/?rfid=         - Find bird by RFID tag
    path('', include(router.urls)),
]
