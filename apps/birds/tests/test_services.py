"""
Service layer tests for birds app.

Tests cover:
- Parent validation
- Composition derived from parents vs. hand-entered
- Coop moves and assignment history
- Archiving
- Search filters
"""

import pytest
from datetime import date, timedelta
from uuid import uuid4
from decimal import Decimal
from django.utils import timezone

from apps.birds.models import Bird, BirdBreed, BirdStatus, CoopAssignment
from apps.birds.services import (
    create_bird,
    update_bird,
    archive_bird,
    set_breed_composition,
    search_birds,
    get_offspring,
    months_ago,
)
from apps.birds.services.exceptions import (
    BirdNotFoundError,
    InvalidParentError,
    InvalidBreedCompositionError,
)
from apps.coops.models import Coop


# =============================================================================
# Bird Management Service Tests
# =============================================================================

@pytest.mark.django_db
class TestCreateBird:
    """Tests for create_bird."""

    def test_chick_inherits_parent_composition(self, owner_user, rooster, hen, breed_asil, breed_kelso):
        chick = create_bird(
            created_by=owner_user,
            sire_id=rooster.id,
            dam_id=hen.id,
        )

        composition = {
            entry['breed_id']: entry['percentage']
            for entry in chick.get_breed_composition()
        }
        assert composition == {
            str(breed_asil.id): Decimal('50.0'),
            str(breed_kelso.id): Decimal('50.0'),
        }
        assert chick.breed_override is False

    def test_explicit_composition_sets_override(self, owner_user, rooster, hen, breed_asil):
        chick = create_bird(
            created_by=owner_user,
            sire_id=rooster.id,
            dam_id=hen.id,
            breed_composition=[{'breed_id': breed_asil.id, 'percentage': Decimal('100')}],
        )

        assert chick.breed_override is True
        assert chick.breed_composition.count() == 1

    def test_sire_must_be_male(self, owner_user, hen):
        with pytest.raises(InvalidParentError, match="Sire must be male"):
            create_bird(created_by=owner_user, sire_id=hen.id)

    def test_dam_must_be_female(self, owner_user, rooster):
        with pytest.raises(InvalidParentError, match="Dam must be female"):
            create_bird(created_by=owner_user, dam_id=rooster.id)

    def test_unknown_parent(self, owner_user):
        with pytest.raises(InvalidParentError, match="Sire not found"):
            create_bird(created_by=owner_user, sire_id=uuid4())

    def test_duplicate_breed_rejected(self, owner_user, breed_asil):
        with pytest.raises(InvalidBreedCompositionError):
            create_bird(
                created_by=owner_user,
                breed_composition=[
                    {'breed_id': breed_asil.id, 'percentage': Decimal('50')},
                    {'breed_id': breed_asil.id, 'percentage': Decimal('50')},
                ],
            )

        assert not Bird.objects.filter(created_by=owner_user, name='').exists()

    def test_coop_creates_open_assignment(self, owner_user, coop):
        bird = create_bird(created_by=owner_user, coop=coop)

        assignment = CoopAssignment.objects.get(bird=bird)
        assert assignment.coop == coop
        assert assignment.removed_at is None
        assert bird.coop == coop


@pytest.mark.django_db
class TestUpdateBird:
    """Tests for update_bird and friends."""

    def test_move_closes_previous_assignment(self, owner_user, coop):
        bird = create_bird(created_by=owner_user, coop=coop)
        other = Coop.objects.create(name='Pen B', capacity=5)

        update_bird(bird_id=bird.id, coop=other)

        assignments = CoopAssignment.objects.filter(bird=bird)
        assert assignments.count() == 2
        assert assignments.get(coop=coop).removed_at == timezone.localdate()
        assert assignments.get(coop=other).removed_at is None

    def test_same_coop_is_noop(self, owner_user, coop):
        bird = create_bird(created_by=owner_user, coop=coop)

        update_bird(bird_id=bird.id, coop=coop, name='Renamed')

        assert CoopAssignment.objects.filter(bird=bird).count() == 1
        bird.refresh_from_db()
        assert bird.name == 'Renamed'

    def test_cannot_be_own_parent(self, rooster):
        with pytest.raises(InvalidParentError, match="own parent"):
            update_bird(bird_id=rooster.id, sire_id=rooster.id)

    def test_parent_change_recomputes_composition(self, owner_user, rooster, hen, breed_asil):
        chick = create_bird(created_by=owner_user, sire_id=rooster.id)
        assert chick.breed_composition.get().percentage == Decimal('50.0')

        update_bird(bird_id=chick.id, dam_id=hen.id)

        assert chick.breed_composition.count() == 2

    def test_override_survives_parent_change(self, owner_user, rooster, hen, breed_kelso):
        chick = create_bird(created_by=owner_user, sire_id=rooster.id)
        set_breed_composition(
            bird_id=chick.id,
            breed_composition=[{'breed_id': breed_kelso.id, 'percentage': Decimal('100')}],
        )

        update_bird(bird_id=chick.id, dam_id=hen.id)

        link = BirdBreed.objects.get(bird=chick)
        assert link.breed == breed_kelso

    def test_update_missing_bird(self):
        with pytest.raises(BirdNotFoundError):
            update_bird(bird_id=uuid4(), name='Ghost')


@pytest.mark.django_db
class TestArchiveBird:
    """Tests for archive_bird."""

    def test_archive_leaves_coop(self, owner_user, coop):
        bird = create_bird(created_by=owner_user, coop=coop)

        archive_bird(bird_id=bird.id)

        bird.refresh_from_db()
        assert bird.status == BirdStatus.ARCHIVED
        assert bird.coop is None
        assert CoopAssignment.objects.get(bird=bird).removed_at is not None


# =============================================================================
# Search Service Tests
# =============================================================================

@pytest.mark.django_db
class TestSearchBirds:
    """Tests for search_birds."""

    def test_archived_hidden_by_default(self, rooster, hen):
        archive_bird(bird_id=hen.id)

        assert list(search_birds()) == [rooster]
        assert search_birds(include_archived=True).count() == 2
        assert list(search_birds(status=BirdStatus.ARCHIVED)) == [hen]

    def test_search_by_band(self, rooster, hen):
        assert list(search_birds(search='B-002')) == [hen]

    def test_filter_by_breed(self, rooster, hen, breed_asil):
        assert list(search_birds(breed=breed_asil.id)) == [rooster]

    def test_breed_filter_counts_each_bird_once(self, owner_user, rooster, hen, breed_asil):
        create_bird(created_by=owner_user, sire_id=rooster.id, dam_id=hen.id)

        assert search_birds(breed=breed_asil.id).count() == 2

    def test_filter_by_age(self, owner_user):
        today = timezone.localdate()
        young = Bird.objects.create(hatch_date=today - timedelta(days=20), created_by=owner_user)
        old = Bird.objects.create(hatch_date=months_ago(14), created_by=owner_user)

        assert list(search_birds(age_max=6)) == [young]
        assert list(search_birds(age_min=12)) == [old]

    def test_offspring(self, owner_user, rooster, hen):
        chick = create_bird(created_by=owner_user, sire_id=rooster.id, dam_id=hen.id)

        assert list(get_offspring(bird_id=rooster.id)) == [chick]
        assert list(search_birds(parent=hen.id)) == [chick]


class TestMonthsAgo:
    """Tests for months_ago."""

    def test_clamps_to_month_end(self):
        assert months_ago(1, today=date(2024, 3, 31)) == date(2024, 2, 29)

    def test_crosses_year(self):
        assert months_ago(14, today=date(2024, 2, 15)) == date(2022, 12, 15)
