from rest_framework import viewsets, mixins, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema
from .models import FeedInventory, FeedConsumption
from .serializers import (
    FeedInventorySerializer,
    FeedStockInputSerializer,
    FeedConsumptionSerializer,
    FeedConsumptionInputSerializer,
    ConsumptionFilterSerializer,
)
from .services import (
    add_feed_stock,
    record_feed_consumption,
    FeedNotFoundError,
    InsufficientFeedError,
)


class FeedPagination(PageNumberPagination):
    """Pagination for feed lists."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class FeedInventoryViewSet(viewsets.ModelViewSet):
    """
    ViewSet for feed stock.

    create: Add stock, merging into an existing row with the same type and brand
    list: ?low_stock=true shows only rows at or below their reorder level
    """

    serializer_class = FeedInventorySerializer
    permission_classes = [IsAuthenticated]
    pagination_class = FeedPagination

    def get_queryset(self):
        queryset = FeedInventory.objects.all()
        if self.request.query_params.get('low_stock', '').lower() == 'true':
            queryset = queryset.low_stock()
        return queryset

    @extend_schema(request=FeedStockInputSerializer, responses={200: FeedInventorySerializer, 201: FeedInventorySerializer})
    def create(self, request, *args, **kwargs):
        """Add stock; 201 for a new row, 200 when merged."""
        serializer = FeedStockInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        feed, created = add_feed_stock(**serializer.validated_data)

        return Response(
            FeedInventorySerializer(feed).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
        )


class FeedConsumptionViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for feed consumption.

    list: Filter by coop and date range
    create: Record consumption and decrement stock
    """

    serializer_class = FeedConsumptionSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = FeedPagination

    def get_queryset(self):
        queryset = FeedConsumption.objects.select_related('coop', 'feed_inventory')
        if self.action != 'list':
            return queryset

        filter_serializer = ConsumptionFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if params.get('coop'):
            queryset = queryset.filter(coop_id=params['coop'])
        if params.get('date_from'):
            queryset = queryset.filter(date__gte=params['date_from'])
        if params.get('date_to'):
            queryset = queryset.filter(date__lte=params['date_to'])

        return queryset

    @extend_schema(request=FeedConsumptionInputSerializer, responses={201: FeedConsumptionSerializer})
    def create(self, request, *args, **kwargs):
        """Record feed given to a coop."""
        serializer = FeedConsumptionInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            consumption = record_feed_consumption(
                recorded_by=request.user,
                **serializer.validated_data
            )
        except FeedNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except InsufficientFeedError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(
            FeedConsumptionSerializer(consumption).data,
            status=status.HTTP_201_CREATED
        )
