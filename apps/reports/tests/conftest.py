import pytest
from datetime import date
from decimal import Decimal
from apps.birds.models import Bird, BirdBreed, BirdSex
from apps.eggs.models import EggRecord, ShellQuality
from apps.health.models import HealthIncident, HealthOutcome


@pytest.fixture
def flock(db, owner_user, coop, rooster, hen, breed_asil, breed_kelso):
    """
    Five birds: the rooster and hen housed in Pen A, their half Asil half
    Kelso chick, and two pure Asil pullets.
    """
    rooster.coop = coop
    rooster.save()
    hen.coop = coop
    hen.save()

    chick = Bird.objects.create(
        name='Chick',
        sex=BirdSex.UNKNOWN,
        hatch_date=date(2024, 5, 1),
        sire=rooster,
        dam=hen,
        created_by=owner_user,
    )
    BirdBreed.objects.create(bird=chick, breed=breed_asil, percentage=Decimal('50.0'))
    BirdBreed.objects.create(bird=chick, breed=breed_kelso, percentage=Decimal('50.0'))

    pullets = []
    for number in (1, 2):
        pullet = Bird.objects.create(
            name=f'Pullet {number}',
            sex=BirdSex.FEMALE,
            hatch_date=date(2024, 2, 1),
            color='Red',
            created_by=owner_user,
        )
        BirdBreed.objects.create(bird=pullet, breed=breed_asil, percentage=Decimal('100.0'))
        pullets.append(pullet)

    return {
        'rooster': rooster,
        'hen': hen,
        'chick': chick,
        'pullets': pullets,
    }


@pytest.fixture
def eggs(db, flock, worker_user):
    """Three eggs: two from the hen, one from a pullet."""
    hen = flock['hen']
    pullet = flock['pullets'][0]
    return [
        EggRecord.objects.create(
            bird=hen, date=date(2024, 6, 1), egg_mark='H-01',
            weight_grams=Decimal('52.5'), shell_quality=ShellQuality.GOOD,
            recorded_by=worker_user,
        ),
        EggRecord.objects.create(
            bird=hen, date=date(2024, 6, 2), egg_mark='H-02',
            shell_quality=ShellQuality.SOFT, recorded_by=worker_user,
        ),
        EggRecord.objects.create(
            bird=pullet, date=date(2024, 6, 2), egg_mark='P-01',
            weight_grams=Decimal('48.0'), shell_quality=ShellQuality.GOOD,
            recorded_by=worker_user,
        ),
    ]


@pytest.fixture
def incidents(db, flock, worker_user):
    """A respiratory case shared by the breeders and a limping chick."""
    respiratory = HealthIncident.objects.create(
        date_noticed=date(2024, 6, 3),
        symptoms='Sneezing and watery eyes',
        diagnosis='Coryza',
        treatment='Antibiotics',
        reported_by=worker_user,
    )
    respiratory.birds.set([flock['rooster'], flock['hen']])

    limping = HealthIncident.objects.create(
        date_noticed=date(2024, 6, 5),
        symptoms='Limping on left leg',
        outcome=HealthOutcome.RECOVERED,
        reported_by=worker_user,
    )
    limping.birds.set([flock['chick']])
    return [respiratory, limping]
