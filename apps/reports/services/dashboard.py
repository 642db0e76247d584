"""Farm dashboard figures."""

from django.conf import settings
from django.db.models import Count, F
from django.utils import timezone
from datetime import date, timedelta
from typing import Optional

from apps.birds.models import Bird, BirdSex, BirdStatus, IdentifierType
from apps.coops.services import coops_with_occupancy
from apps.eggs.models import EggRecord
from apps.eggs.services import active_incubations
from apps.feed.models import FeedInventory
from apps.health.models import HealthIncident, HealthOutcome
from apps.health.services import upcoming_vaccinations

RECENT_BIRDS = 5


def _counts_by(queryset, field_name, choices):
    counts = {value: 0 for value in choices.values}
    for row in queryset.order_by().values(field_name).annotate(total=Count('id')):
        counts[row[field_name]] = row['total']
    return counts


def get_dashboard(today: Optional[date] = None) -> dict:
    """
    Figures for the farm dashboard.

    Archived birds are left out of the flock counts.

    Returns:
        dict with summary (flock counts by status and sex), eggs (laid in
        the last 7 and 30 days), alerts (active incubations, ongoing
        incidents, vaccinations due, low-stock feed, full coops),
        lowStockFeed and recentBirds
    """
    today = today or timezone.localdate()
    flock = Bird.objects.not_archived()

    by_status = _counts_by(flock, 'status', BirdStatus)
    by_status.pop(BirdStatus.ARCHIVED, None)
    by_sex = _counts_by(flock, 'sex', BirdSex)

    low_stock = list(FeedInventory.objects.low_stock())
    full_coops = list(
        coops_with_occupancy()
        .filter(capacity__gt=0, occupancy__gte=F('capacity'))
        .order_by('name')
    )
    recent_birds = flock.prefetch_related('identifiers').order_by('-created_at')[:RECENT_BIRDS]

    return {
        'summary': {
            'totalBirds': flock.count(),
            'males': by_sex[BirdSex.MALE],
            'females': by_sex[BirdSex.FEMALE],
            'unknownSex': by_sex[BirdSex.UNKNOWN],
            'byStatus': by_status,
        },
        'eggs': {
            'last7Days': EggRecord.objects.filter(date__gt=today - timedelta(days=7)).count(),
            'last30Days': EggRecord.objects.filter(date__gt=today - timedelta(days=30)).count(),
        },
        'alerts': {
            'activeIncubations': active_incubations().count(),
            'ongoingHealthIncidents': HealthIncident.objects.filter(
                outcome=HealthOutcome.ONGOING
            ).count(),
            'vaccinationsDue': upcoming_vaccinations(
                today=today,
                days=settings.VACCINATION_UPCOMING_DAYS,
            ).count(),
            'lowStockFeedsCount': len(low_stock),
            'coopsAtCapacity': [
                {
                    'id': str(coop.id),
                    'name': coop.name,
                    'capacity': coop.capacity,
                    'occupancy': coop.occupancy,
                }
                for coop in full_coops
            ],
        },
        'lowStockFeed': [
            {
                'id': str(feed.id),
                'feedType': feed.feed_type,
                'brand': feed.brand,
                'quantityKg': float(feed.quantity_kg),
                'reorderLevel': float(feed.reorder_level),
            }
            for feed in low_stock
        ],
        'recentBirds': [
            {
                'id': str(bird.id),
                'name': bird.name,
                'sex': bird.sex,
                'hatchDate': bird.hatch_date,
                'bandNumber': bird.get_identifier(IdentifierType.BAND),
                'createdAt': bird.created_at,
            }
            for bird in recent_birds
        ],
    }
