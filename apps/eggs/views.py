from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import IsFarmOwnerOrReadOnly
from .models import IncubationRecord
from .serializers import (
    EggRecordSerializer,
    EggRecordCreateSerializer,
    EggFilterSerializer,
    IncubationRecordSerializer,
    IncubationCreateSerializer,
    IncubationUpdateSerializer,
)
from .services import (
    record_egg,
    filter_eggs,
    start_incubation,
    update_incubation,
    LayingBirdNotFoundError,
    NotAHenError,
    EggNotFoundError,
    AlreadyIncubatingError,
    IncubationNotFoundError,
)


class EggPagination(PageNumberPagination):
    """Pagination for egg and incubation records."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class EggRecordViewSet(viewsets.ModelViewSet):
    """
    ViewSet for egg records.

    list: Get eggs (filter by bird, date range, shell quality)
    create: Record an egg for a hen
    retrieve/update/destroy: Standard operations
    """

    serializer_class = EggRecordSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = EggPagination

    def get_queryset(self):
        """Filter eggs using input serializer validation."""
        if self.action != 'list':
            return filter_eggs()

        filter_serializer = EggFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return filter_eggs(**filter_serializer.validated_data)

    @extend_schema(request=EggRecordCreateSerializer, responses={201: EggRecordSerializer})
    def create(self, request, *args, **kwargs):
        """Record an egg."""
        serializer = EggRecordCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            egg = record_egg(recorded_by=request.user, **serializer.validated_data)
        except LayingBirdNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except NotAHenError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(
            EggRecordSerializer(egg).data,
            status=status.HTTP_201_CREATED
        )


class IncubationViewSet(viewsets.ModelViewSet):
    """
    ViewSet for incubation records.

    Reads are open to all staff, writes to owners.
    """

    serializer_class = IncubationRecordSerializer
    permission_classes = [IsAuthenticated, IsFarmOwnerOrReadOnly]
    pagination_class = EggPagination

    def get_queryset(self):
        """Filter by ?outcome=."""
        queryset = IncubationRecord.objects.select_related(
            'egg__bird', 'egg__recorded_by', 'chick'
        )
        outcome = self.request.query_params.get('outcome')
        if outcome:
            queryset = queryset.filter(outcome=outcome)
        return queryset

    @extend_schema(request=IncubationCreateSerializer, responses={201: IncubationRecordSerializer})
    def create(self, request, *args, **kwargs):
        """Set an egg for incubation."""
        serializer = IncubationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            incubation = start_incubation(created_by=request.user, **serializer.validated_data)
        except EggNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except AlreadyIncubatingError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(
            IncubationRecordSerializer(incubation).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=IncubationUpdateSerializer, responses={200: IncubationRecordSerializer})
    def update(self, request, *args, **kwargs):
        """Record the outcome, hatch date or chick."""
        serializer = IncubationUpdateSerializer(
            data=request.data,
            partial=kwargs.pop('partial', False)
        )
        serializer.is_valid(raise_exception=True)

        try:
            incubation = update_incubation(
                incubation_id=kwargs.get('pk'),
                **serializer.validated_data
            )
        except IncubationNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(IncubationRecordSerializer(incubation).data)
