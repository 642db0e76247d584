"""Saved report presets."""

from django.db import transaction
from django.contrib.auth import get_user_model
from uuid import UUID
from typing import Optional
import logging

from ..exceptions import PresetNotFoundError
from ..models import ReportPreset

User = get_user_model()
logger = logging.getLogger(__name__)


def _clear_other_defaults(*, user: User, report_type: str, keep_id: Optional[UUID] = None) -> None:
    others = ReportPreset.objects.filter(created_by=user, report_type=report_type, is_default=True)
    if keep_id is not None:
        others = others.exclude(id=keep_id)
    cleared = others.update(is_default=False)
    if cleared:
        logger.info(
            "Cleared %s default %s preset(s) for %s",
            cleared, report_type, user
        )


def get_user_preset(*, preset_id: UUID, user: User) -> ReportPreset:
    """
    A preset owned by ``user``.

    Raises:
        PresetNotFoundError: If it doesn't exist or belongs to someone else
    """
    try:
        return ReportPreset.objects.get(id=preset_id, created_by=user)
    except ReportPreset.DoesNotExist:
        raise PresetNotFoundError("Preset not found")


@transaction.atomic
def create_preset(
    *,
    created_by: User,
    name: str,
    report_type: str,
    config: dict,
    description: str = '',
    is_default: bool = False
) -> ReportPreset:
    """
    Save a report configuration.

    A new default preset replaces the user's previous default for the
    same report type.

    Args:
        created_by: Owner of the preset
        name: Display name
        report_type: birds, eggs or health
        config: {columns, filters, sortColumn, sortDirection}
        description: Optional description
        is_default: Load this preset first for the report type

    Returns:
        Created ReportPreset
    """
    if is_default:
        _clear_other_defaults(user=created_by, report_type=report_type)

    preset = ReportPreset.objects.create(
        created_by=created_by,
        name=name,
        description=description,
        report_type=report_type,
        config=config,
        is_default=is_default,
    )

    if is_default:
        logger.info("Preset %s is now the default %s preset for %s", preset.id, report_type, created_by)
    return preset


@transaction.atomic
def update_preset(*, preset_id: UUID, user: User, **fields) -> ReportPreset:
    """
    Update a preset owned by ``user``.

    Making it the default (or moving a default preset to another report
    type) clears the user's other defaults for that type.

    Raises:
        PresetNotFoundError: If it doesn't exist or belongs to someone else
    """
    try:
        preset = ReportPreset.objects.select_for_update().get(id=preset_id, created_by=user)
    except ReportPreset.DoesNotExist:
        raise PresetNotFoundError("Preset not found")

    for field, value in fields.items():
        setattr(preset, field, value)

    if preset.is_default:
        _clear_other_defaults(user=user, report_type=preset.report_type, keep_id=preset.id)

    preset.save()

    if fields.get('is_default'):
        logger.info("Preset %s is now the default %s preset for %s", preset.id, preset.report_type, user)
    return preset
