"""
Serializers for reports app.

Report endpoints speak camelCase (``reportType``, ``sortColumn``,
``isDefault``); fields map onto snake_case service arguments through
``source`` so ``validated_data`` can be passed straight to the services.

Input Serializers:
    ReportQuerySerializer - Body of summary/ (and base of the others)
    ReportExecuteSerializer - Body of execute/ (adds limit/offset)
    ReportExportSerializer - Body of export/ (adds language)
    ColumnsQuerySerializer - ?type= of columns/
    ValuesQuerySerializer - ?type=&column= of values/
    FlatExportQuerySerializer - Query parameters of export/<type>/
    PresetQuerySerializer - ?type= of presets/

Model Serializers:
    ReportPresetSerializer - Saved report configurations

Response Serializers:
    ReportColumnsResponseSerializer, ReportResultSerializer,
    ReportSummarySerializer, DashboardResponseSerializer, ErrorSerializer
"""

from rest_framework import serializers
from django.conf import settings
from apps.accounts.models import Language
from .columns import get_column
from .models import ReportPreset, ReportType
from .services import create_preset, update_preset

SORT_DIRECTIONS = ['asc', 'desc']


# =============================================================================
# Input Serializers
# =============================================================================

class ReportQuerySerializer(serializers.Serializer):
    """
    Validate a report request body.

    Body:
        reportType (str): birds, eggs or health
        columns (list[str]): Column ids to show, at least one
        filters (dict): {columnId: [values]}
        sortColumn (str): Optional sortable column id
        sortDirection (str): 'asc' or 'desc'

    Note:
        The report type and column ids are checked against the column
        registry by the services, which answer with the same 400 body.
    """

    reportType = serializers.CharField(source='report_type')
    columns = serializers.ListField(child=serializers.CharField(), min_length=1)
    filters = serializers.DictField(
        child=serializers.ListField(child=serializers.CharField()),
        required=False,
        default=dict,
    )
    sortColumn = serializers.CharField(
        source='sort_column',
        required=False,
        allow_null=True,
        allow_blank=True,
    )
    sortDirection = serializers.ChoiceField(
        source='sort_direction',
        choices=SORT_DIRECTIONS,
        required=False,
        allow_null=True,
    )


class ReportExecuteSerializer(ReportQuerySerializer):
    """Report request with a pagination window."""

    limit = serializers.IntegerField(
        min_value=1,
        max_value=settings.REPORT_MAX_LIMIT,
        default=settings.REPORT_DEFAULT_LIMIT,
    )
    offset = serializers.IntegerField(min_value=0, default=0)


class ReportExportSerializer(ReportQuerySerializer):
    """Report request for CSV download; headers use ``language``."""

    language = serializers.ChoiceField(choices=Language.choices, required=False)


class ColumnsQuerySerializer(serializers.Serializer):
    type = serializers.CharField(required=False, default=ReportType.BIRDS)


class ValuesQuerySerializer(serializers.Serializer):
    type = serializers.CharField()
    column = serializers.CharField()


class FlatExportQuerySerializer(serializers.Serializer):
    """
    Validate flat export query parameters.

    Query Parameters:
        startDate, endDate (date): Range for weights and eggs, both needed
        status (str): Bird status for birds, 'all' for every status
        outcome (str): Outcome for health-incidents, 'all' for every outcome
    """

    startDate = serializers.DateField(source='start_date', required=False)
    endDate = serializers.DateField(source='end_date', required=False)
    status = serializers.CharField(required=False)
    outcome = serializers.CharField(required=False)

    def validate(self, attrs):
        start_date = attrs.get('start_date')
        end_date = attrs.get('end_date')
        if start_date and end_date and start_date > end_date:
            raise serializers.ValidationError({'startDate': 'Start date must be before end date'})
        return attrs


class PresetQuerySerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=ReportType.choices, required=False)


# =============================================================================
# Model Serializers
# =============================================================================

class PresetConfigSerializer(serializers.Serializer):
    """Saved columns, filters and sort; keys stay camelCase in storage."""

    columns = serializers.ListField(child=serializers.CharField(), min_length=1)
    filters = serializers.DictField(
        child=serializers.ListField(child=serializers.CharField()),
        required=False,
        default=dict,
    )
    sortColumn = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    sortDirection = serializers.ChoiceField(
        choices=SORT_DIRECTIONS,
        required=False,
        allow_null=True,
        default=None,
    )


class ReportPresetSerializer(serializers.ModelSerializer):
    """Saved report configuration owned by the current user."""

    reportType = serializers.ChoiceField(source='report_type', choices=ReportType.choices)
    config = PresetConfigSerializer()
    isDefault = serializers.BooleanField(source='is_default', required=False, default=False)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = ReportPreset
        fields = ['id', 'name', 'description', 'reportType', 'config', 'isDefault', 'createdAt', 'updatedAt']
        read_only_fields = ['id']

    def validate(self, attrs):
        report_type = attrs.get('report_type') or getattr(self.instance, 'report_type', None)
        config = attrs.get('config')
        if config is None:
            if self.instance is not None and report_type != self.instance.report_type:
                raise serializers.ValidationError({'config': 'Config is required when changing the report type'})
            return attrs

        # Partial updates skip the nested defaults
        if not config.get('columns'):
            raise serializers.ValidationError({'config': 'columns: This field is required.'})
        config = {'filters': {}, 'sortColumn': None, 'sortDirection': None, **config}

        for column_id in config['columns']:
            if get_column(report_type, column_id) is None:
                raise serializers.ValidationError({'config': f'Invalid column: {column_id}'})

        for column_id in config['filters']:
            column = get_column(report_type, column_id)
            if column is None or not column.filterable:
                raise serializers.ValidationError({'config': f'Column is not filterable: {column_id}'})

        sort_column = config.get('sortColumn')
        if sort_column:
            column = get_column(report_type, sort_column)
            if column is None or not column.sortable:
                raise serializers.ValidationError({'config': f'Column is not sortable: {sort_column}'})

        attrs['config'] = config
        return attrs

    def create(self, validated_data):
        return create_preset(created_by=self.context['request'].user, **validated_data)

    def update(self, instance, validated_data):
        return update_preset(preset_id=instance.id, user=self.context['request'].user, **validated_data)


# =============================================================================
# Response Serializers
# =============================================================================

class ReportColumnSerializer(serializers.Serializer):
    id = serializers.CharField()
    label = serializers.CharField()
    labelLocalized = serializers.CharField()
    type = serializers.CharField()
    filterable = serializers.BooleanField()
    sortable = serializers.BooleanField()
    options = serializers.ListField(child=serializers.DictField(), required=False)


class ReportColumnsResponseSerializer(serializers.Serializer):
    reportType = serializers.CharField()
    columns = ReportColumnSerializer(many=True)
    filterableColumns = serializers.ListField(child=serializers.CharField())
    sortableColumns = serializers.ListField(child=serializers.CharField())
    defaultColumns = serializers.ListField(child=serializers.CharField())
    availableReportTypes = serializers.ListField(child=serializers.DictField())


class ReportResultSerializer(serializers.Serializer):
    """Response serializer for execute/."""
    results = serializers.ListField(child=serializers.DictField())
    totalCount = serializers.IntegerField()
    limit = serializers.IntegerField()
    offset = serializers.IntegerField()


class ReportSummarySerializer(serializers.Serializer):
    """Response serializer for summary/."""
    results = serializers.ListField(child=serializers.DictField())
    totalCount = serializers.IntegerField()
    totalRecordCount = serializers.IntegerField()


class ValuesResponseSerializer(serializers.Serializer):
    values = serializers.ListField(child=serializers.CharField())


class DashboardResponseSerializer(serializers.Serializer):
    """Response serializer for dashboard/."""
    summary = serializers.DictField()
    eggs = serializers.DictField()
    alerts = serializers.DictField()
    lowStockFeed = serializers.ListField(child=serializers.DictField())
    recentBirds = serializers.ListField(child=serializers.DictField())


class ErrorSerializer(serializers.Serializer):
    """Standard error response serializer."""
    error = serializers.CharField()
