from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from apps.birds.serializers import BirdListSerializer
from .serializers import CoopSerializer
from .services import (
    coops_with_occupancy,
    get_coop_residents,
    delete_coop,
    CoopNotFoundError,
    CoopNotEmptyError,
)


class CoopPagination(PageNumberPagination):
    """Pagination for coops."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class CoopViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Coop CRUD operations.

    Any staff member may manage coops. Delete is refused while the coop
    still houses active birds.
    """

    serializer_class = CoopSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = CoopPagination

    def get_queryset(self):
        """Coops with occupancy, filterable by ?status= and ?coop_type=."""
        queryset = coops_with_occupancy()

        coop_status = self.request.query_params.get('status')
        if coop_status:
            queryset = queryset.filter(status=coop_status)

        coop_type = self.request.query_params.get('coop_type')
        if coop_type:
            queryset = queryset.filter(coop_type=coop_type)

        return queryset

    def perform_create(self, serializer):
        coop = serializer.save()
        coop.occupancy = 0

    def perform_update(self, serializer):
        coop = serializer.save()
        coop.occupancy = coop.birds.live().count()

    def destroy(self, request, *args, **kwargs):
        """Delete an empty coop."""
        try:
            delete_coop(coop_id=kwargs.get('pk'))
        except CoopNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except CoopNotEmptyError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['get'])
    def birds(self, request, pk=None):
        """
        List the coop's current residents.

        GET /api/coops/{id}/birds/
        """
        coop = self.get_object()
        serializer = BirdListSerializer(get_coop_residents(coop_id=coop.id), many=True)
        return Response(serializer.data)
