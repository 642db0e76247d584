"""Fixtures shared by every app's test suite."""
import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.breeds.models import Breed
from apps.coops.models import Coop, CoopType
from apps.birds.models import Bird, BirdBreed, BirdIdentifier, BirdSex, IdentifierType


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def owner_user(db):
    """Create and return the farm owner."""
    return User.objects.create_user(
        email='owner@farm.example.com',
        password='TestPass123!',
        display_name='Farm Owner',
        role=UserRole.OWNER,
    )


@pytest.fixture
def worker_user(db):
    """Create and return a farm worker."""
    return User.objects.create_user(
        email='worker@farm.example.com',
        password='TestPass123!',
        display_name='Farm Worker',
        role=UserRole.WORKER,
    )


@pytest.fixture
def owner_client(owner_user):
    """Return API client authenticated as the owner."""
    return _client_for(owner_user)


@pytest.fixture
def worker_client(worker_user):
    """Return API client authenticated as a worker."""
    return _client_for(worker_user)


# =============================================================================
# Farm fixtures
# =============================================================================

@pytest.fixture
def breed_asil(db):
    """Create and return the Asil breed."""
    return Breed.objects.create(name='Asil', code='ASL')


@pytest.fixture
def breed_kelso(db):
    """Create and return the Kelso breed."""
    return Breed.objects.create(name='Kelso', code='KLS')


@pytest.fixture
def coop(db):
    """Create and return a breeding pen."""
    return Coop.objects.create(name='Pen A', capacity=10, coop_type=CoopType.BREEDING_PEN)


@pytest.fixture
def rooster(db, owner_user, breed_asil):
    """Create and return a pure Asil stag with band B-001."""
    bird = Bird.objects.create(
        name='Red',
        sex=BirdSex.MALE,
        hatch_date=date(2023, 1, 10),
        color='Red',
        created_by=owner_user,
    )
    BirdIdentifier.objects.create(bird=bird, id_type=IdentifierType.BAND, id_value='B-001')
    BirdBreed.objects.create(bird=bird, breed=breed_asil, percentage=Decimal('100.0'))
    return bird


@pytest.fixture
def hen(db, owner_user, breed_kelso):
    """Create and return a pure Kelso hen with band B-002."""
    bird = Bird.objects.create(
        name='Blanca',
        sex=BirdSex.FEMALE,
        hatch_date=date(2023, 3, 5),
        color='White',
        created_by=owner_user,
    )
    BirdIdentifier.objects.create(bird=bird, id_type=IdentifierType.BAND, id_value='B-002')
    BirdBreed.objects.create(bird=bird, breed=breed_kelso, percentage=Decimal('100.0'))
    return bird
