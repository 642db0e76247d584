from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.pagination import PageNumberPagination
from .models import WeightRecord
from .serializers import WeightRecordSerializer, WeightFilterSerializer


class WeightPagination(PageNumberPagination):
    """Pagination for weight records."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class WeightRecordViewSet(viewsets.ModelViewSet):
    """
    ViewSet for weight records.

    list: Get weights (filter by bird, milestone)
    create: Record a weighing
    retrieve/update/destroy: Standard operations
    """

    serializer_class = WeightRecordSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = WeightPagination

    def get_queryset(self):
        """Filter weights using input serializer validation."""
        queryset = WeightRecord.objects.select_related('bird', 'recorded_by')
        if self.action != 'list':
            return queryset

        filter_serializer = WeightFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if params.get('bird'):
            queryset = queryset.filter(bird_id=params['bird'])
        if params.get('milestone'):
            queryset = queryset.filter(milestone=params['milestone'])

        return queryset

    def perform_create(self, serializer):
        serializer.save(recorded_by=self.request.user)
