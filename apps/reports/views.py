from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .columns import (
    DEFAULT_COLUMNS,
    REPORT_TYPES,
    get_report_columns,
    get_filterable_columns,
    get_sortable_columns,
    is_report_type,
)
from .csv_export import csv_response
from .exceptions import ReportsServiceError, InvalidReportTypeError
from .models import ReportPreset
from .serializers import (
    # Input serializers
    ReportQuerySerializer,
    ReportExecuteSerializer,
    ReportExportSerializer,
    ColumnsQuerySerializer,
    ValuesQuerySerializer,
    FlatExportQuerySerializer,
    PresetQuerySerializer,
    ReportPresetSerializer,
    # Response serializers
    ReportColumnsResponseSerializer,
    ReportResultSerializer,
    ReportSummarySerializer,
    ValuesResponseSerializer,
    DashboardResponseSerializer,
    ErrorSerializer,
)
from .services import (
    execute_report,
    summarize_report,
    distinct_column_values,
    build_report_export,
    build_flat_export,
    get_dashboard,
)


def _error(e):
    return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)


@extend_schema(
    parameters=[
        OpenApiParameter('type', OpenApiTypes.STR, description="Report type: 'birds', 'eggs', 'health'", default='birds'),
    ],
    responses={
        200: ReportColumnsResponseSerializer,
        400: ErrorSerializer,
    },
    description="Get the columns a report type can show, filter and sort on.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def report_columns(request):
    """Column metadata for the report builder - thin HTTP handler."""
    query_serializer = ColumnsQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    report_type = query_serializer.validated_data['type']

    if not is_report_type(report_type):
        return _error(InvalidReportTypeError(f"Invalid report type: {report_type}"))

    return Response({
        'reportType': report_type,
        'columns': [column.to_dict() for column in get_report_columns(report_type)],
        'filterableColumns': [column.id for column in get_filterable_columns(report_type)],
        'sortableColumns': [column.id for column in get_sortable_columns(report_type)],
        'defaultColumns': DEFAULT_COLUMNS[report_type],
        'availableReportTypes': REPORT_TYPES,
    })


@extend_schema(
    parameters=[
        OpenApiParameter('type', OpenApiTypes.STR, description="Report type: 'birds', 'eggs', 'health'", required=True),
        OpenApiParameter('column', OpenApiTypes.STR, description='Filterable column id', required=True),
    ],
    responses={
        200: ValuesResponseSerializer,
        400: ErrorSerializer,
    },
    description="Get the distinct values of a filterable column, to fill filter pickers.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def report_values(request):
    """Distinct filter values - thin HTTP handler."""
    query_serializer = ValuesQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    try:
        values = distinct_column_values(report_type=params['type'], column_id=params['column'])
    except ReportsServiceError as e:
        return _error(e)

    return Response({'values': values})


@extend_schema(
    request=ReportExecuteSerializer,
    responses={
        200: ReportResultSerializer,
        400: ErrorSerializer,
    },
    description="Run a report: filtered, sorted rows of the selected columns with a limit/offset window.",
    tags=['reports'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def report_execute(request):
    """Run a report - thin HTTP handler."""
    serializer = ReportExecuteSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        data = execute_report(**serializer.validated_data)
    except ReportsServiceError as e:
        return _error(e)

    return Response(data)


@extend_schema(
    request=ReportQuerySerializer,
    responses={
        200: ReportSummarySerializer,
        400: ErrorSerializer,
    },
    description="Group every matching record by the selected columns and count each group.",
    tags=['reports'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def report_summary(request):
    """Grouped counts - thin HTTP handler."""
    serializer = ReportQuerySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        data = summarize_report(**serializer.validated_data)
    except ReportsServiceError as e:
        return _error(e)

    return Response(data)


@extend_schema(
    request=ReportExportSerializer,
    responses={
        (200, 'text/csv'): OpenApiTypes.BINARY,
        400: ErrorSerializer,
    },
    description="Download every matching record as CSV with headers in the user's language.",
    tags=['reports'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def report_export(request):
    """CSV download of a report - thin HTTP handler."""
    serializer = ReportExportSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    params = dict(serializer.validated_data)
    params['language'] = params.get('language') or request.user.language

    try:
        header, rows = build_report_export(**params)
    except ReportsServiceError as e:
        return _error(e)

    return csv_response(params['report_type'], header, rows)


@extend_schema(
    parameters=[
        OpenApiParameter('startDate', OpenApiTypes.DATE, description='Start date (weights, eggs)'),
        OpenApiParameter('endDate', OpenApiTypes.DATE, description='End date (weights, eggs)'),
        OpenApiParameter('status', OpenApiTypes.STR, description="Bird status or 'all' (birds)"),
        OpenApiParameter('outcome', OpenApiTypes.STR, description="Outcome or 'all' (health-incidents)"),
    ],
    responses={
        (200, 'text/csv'): OpenApiTypes.BINARY,
        400: ErrorSerializer,
    },
    description="Download a flat data export: birds, weights, eggs, vaccinations or health-incidents.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def flat_export(request, export_type):
    """CSV download of one data set - thin HTTP handler."""
    query_serializer = FlatExportQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    try:
        header, rows = build_flat_export(export_type=export_type, **query_serializer.validated_data)
    except ReportsServiceError as e:
        return _error(e)

    return csv_response(export_type, header, rows)


@extend_schema(
    responses={200: DashboardResponseSerializer},
    description="Get farm dashboard figures: flock counts, egg production and alerts.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard(request):
    """Farm dashboard - thin HTTP handler."""
    return Response(get_dashboard())


class PresetPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


@extend_schema(tags=['reports'])
class ReportPresetViewSet(viewsets.ModelViewSet):
    """
    ViewSet for saved report presets.

    Users only ever see their own presets; anyone else's are 404.

    list: Get my presets (?type=birds|eggs|health), most recently updated first
    create: Save a preset (isDefault replaces my previous default)
    retrieve: Get a preset
    update: Update a preset
    destroy: Delete a preset
    """

    serializer_class = ReportPresetSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = PresetPagination

    def get_queryset(self):
        queryset = ReportPreset.objects.filter(created_by=self.request.user)

        if self.action == 'list':
            filter_serializer = PresetQuerySerializer(data=self.request.query_params)
            filter_serializer.is_valid(raise_exception=True)
            report_type = filter_serializer.validated_data.get('type')
            if report_type:
                queryset = queryset.filter(report_type=report_type)

        return queryset.order_by('-updated_at')
