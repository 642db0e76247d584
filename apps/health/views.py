from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from django.conf import settings
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from .models import HealthIncident, Vaccination, Medication
from .serializers import (
    HealthIncidentSerializer,
    VaccinationSerializer,
    MedicationSerializer,
    IncidentFilterSerializer,
    VaccinationFilterSerializer,
    MedicationFilterSerializer,
    HealthSummarySerializer,
)
from .services import (
    upcoming_vaccinations,
    active_medications,
    get_health_summary,
    UnknownBirdsError,
)


class HealthPagination(PageNumberPagination):
    """Pagination for health records."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class BirdHealthRecordViewSet(viewsets.ModelViewSet):
    """
    Shared behaviour for health records linked to birds.

    Unknown bird ids answer 404. The requesting user is stored in
    ``recorded_by_field``.
    """

    permission_classes = [IsAuthenticated]
    pagination_class = HealthPagination
    recorded_by_field = None
    filter_serializer_class = None

    def get_base_queryset(self):
        raise NotImplementedError

    def filter_queryset_by(self, queryset, params):
        if params.get('bird'):
            queryset = queryset.filter(birds__id=params['bird'])
        return queryset

    def get_queryset(self):
        queryset = self.get_base_queryset().prefetch_related('birds__identifiers')
        if self.action != 'list':
            return queryset

        filter_serializer = self.filter_serializer_class(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return self.filter_queryset_by(queryset, filter_serializer.validated_data).distinct()

    def create(self, request, *args, **kwargs):
        try:
            return super().create(request, *args, **kwargs)
        except UnknownBirdsError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

    def update(self, request, *args, **kwargs):
        try:
            return super().update(request, *args, **kwargs)
        except UnknownBirdsError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

    def perform_create(self, serializer):
        serializer.save(**{self.recorded_by_field: self.request.user})


class HealthIncidentViewSet(BirdHealthRecordViewSet):
    """
    ViewSet for health incidents.

    list: ?bird=, ?outcome=
    """

    serializer_class = HealthIncidentSerializer
    filter_serializer_class = IncidentFilterSerializer
    recorded_by_field = 'reported_by'

    def get_base_queryset(self):
        return HealthIncident.objects.all()

    def filter_queryset_by(self, queryset, params):
        queryset = super().filter_queryset_by(queryset, params)
        if params.get('outcome'):
            queryset = queryset.filter(outcome=params['outcome'])
        return queryset


class VaccinationViewSet(BirdHealthRecordViewSet):
    """
    ViewSet for vaccinations.

    list: ?bird=, ?upcoming=true (due within the next week, today included)
    """

    serializer_class = VaccinationSerializer
    filter_serializer_class = VaccinationFilterSerializer
    recorded_by_field = 'administered_by'

    def get_base_queryset(self):
        return Vaccination.objects.all()

    def filter_queryset_by(self, queryset, params):
        queryset = super().filter_queryset_by(queryset, params)
        if params.get('upcoming'):
            due = upcoming_vaccinations(
                today=timezone.localdate(),
                days=settings.VACCINATION_UPCOMING_DAYS
            )
            queryset = queryset.filter(id__in=due.values('id')).order_by('next_due_date')
        return queryset


class MedicationViewSet(BirdHealthRecordViewSet):
    """
    ViewSet for medications.

    list: ?bird=, ?active=true|false
    """

    serializer_class = MedicationSerializer
    filter_serializer_class = MedicationFilterSerializer
    recorded_by_field = 'administered_by'

    def get_base_queryset(self):
        return Medication.objects.select_related('health_incident')

    def filter_queryset_by(self, queryset, params):
        queryset = super().filter_queryset_by(queryset, params)
        active = params.get('active')
        if active is not None:
            running = active_medications(today=timezone.localdate()).values('id')
            if active:
                queryset = queryset.filter(id__in=running)
            else:
                queryset = queryset.exclude(id__in=running)
        return queryset


@extend_schema(
    responses={200: HealthSummarySerializer},
    description="Upcoming and recent vaccinations, ongoing incidents and birds under withdrawal.",
    tags=['health'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def health_summary(request):
    """Flock health overview - thin HTTP handler."""
    return Response(get_health_summary())
