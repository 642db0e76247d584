from uuid import UUID
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.accounts.permissions import IsFarmOwnerOrReadOnly
from .models import BirdColor, EggSizeCategory, FeedStage
from .serializers import (
    BirdColorSerializer,
    EggSizeCategorySerializer,
    FeedStageSerializer,
    EggWeightQuerySerializer,
)
from .services import (
    colors_by_breed_preference,
    delete_bird_color,
    classify_egg_weight,
    ColorInUseError,
)


class SettingsPagination(PageNumberPagination):
    """Pagination for settings lists."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class BirdColorViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the plumage colour list.

    Anyone signed in may read; owners maintain the list. A colour still
    carried by birds cannot be deleted.
    """

    queryset = BirdColor.objects.all()
    serializer_class = BirdColorSerializer
    permission_classes = [IsAuthenticated, IsFarmOwnerOrReadOnly]
    pagination_class = SettingsPagination

    @extend_schema(parameters=[
        OpenApiParameter('breeds', str, description='Comma separated breed ids; most used colours first'),
    ])
    def list(self, request, *args, **kwargs):
        """List colours, optionally sorted by how common they are in ?breeds=."""
        breeds = request.query_params.get('breeds', '')
        if not breeds:
            return super().list(request, *args, **kwargs)

        try:
            breed_ids = [UUID(breed_id) for breed_id in breeds.split(',') if breed_id]
        except ValueError:
            return Response(
                {'error': 'breeds: Must be a list of breed ids'},
                status=status.HTTP_400_BAD_REQUEST
            )

        colors = colors_by_breed_preference(breed_ids=breed_ids)
        page = self.paginate_queryset(colors)
        return self.get_paginated_response(self.get_serializer(page, many=True).data)

    def destroy(self, request, *args, **kwargs):
        """Delete an unused colour."""
        try:
            delete_bird_color(color=self.get_object())
        except ColorInUseError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(status=status.HTTP_204_NO_CONTENT)


class EggSizeCategoryViewSet(viewsets.ModelViewSet):
    """ViewSet for egg size categories, lightest first."""

    queryset = EggSizeCategory.objects.all()
    serializer_class = EggSizeCategorySerializer
    permission_classes = [IsAuthenticated, IsFarmOwnerOrReadOnly]
    pagination_class = SettingsPagination

    @extend_schema(parameters=[EggWeightQuerySerializer], responses={200: EggSizeCategorySerializer})
    @action(detail=False, methods=['get'])
    def classify(self, request):
        """
        Find the size category for an egg weight.

        GET /api/settings/egg-sizes/classify/?weight=58.5
        """
        serializer = EggWeightQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)

        category = classify_egg_weight(serializer.validated_data['weight'])
        if category is None:
            return Response(
                {'error': 'No size category covers this weight'},
                status=status.HTTP_404_NOT_FOUND
            )
        return Response(EggSizeCategorySerializer(category).data)


class FeedStageViewSet(viewsets.ModelViewSet):
    """ViewSet for feed stages, youngest first. ?feed_type= filters."""

    serializer_class = FeedStageSerializer
    permission_classes = [IsAuthenticated, IsFarmOwnerOrReadOnly]
    pagination_class = SettingsPagination

    def get_queryset(self):
        queryset = FeedStage.objects.all()

        feed_type = self.request.query_params.get('feed_type')
        if feed_type:
            queryset = queryset.filter(feed_type=feed_type)

        return queryset
