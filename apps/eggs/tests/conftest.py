import pytest
from datetime import date
from decimal import Decimal
from apps.eggs.models import EggRecord, ShellQuality


@pytest.fixture
def egg(db, hen, worker_user):
    """Create and return an egg laid by the hen."""
    return EggRecord.objects.create(
        bird=hen,
        date=date(2024, 6, 1),
        egg_mark='H2-01',
        weight_grams=Decimal('52.5'),
        shell_quality=ShellQuality.GOOD,
        recorded_by=worker_user,
    )
