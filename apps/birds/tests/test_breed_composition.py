"""
Unit tests for breed composition inheritance.

These run without a database.
"""

from decimal import Decimal

from apps.birds.services.breed_composition import (
    calculate_child_breed_composition,
    get_primary_breed,
    get_total_percentage,
    is_complete,
    normalize_breed_percentages,
    round_percentage,
)


def _entry(breed_id, percentage):
    return {'breed_id': breed_id, 'percentage': Decimal(str(percentage))}


class TestChildComposition:
    """Tests for calculate_child_breed_composition."""

    def test_two_pure_parents_split_evenly(self):
        child = calculate_child_breed_composition([_entry('A', 100)], [_entry('B', 100)])

        assert child == [_entry('A', '50.0'), _entry('B', '50.0')]

    def test_shared_breed_is_summed(self):
        sire = [_entry('A', 50), _entry('B', 50)]
        dam = [_entry('A', 100)]

        child = calculate_child_breed_composition(sire, dam)

        assert child == [_entry('A', '75.0'), _entry('B', '25.0')]

    def test_result_sorted_largest_first(self):
        sire = [_entry('A', 25), _entry('B', 75)]
        dam = [_entry('C', 100)]

        child = calculate_child_breed_composition(sire, dam)

        assert [entry['breed_id'] for entry in child] == ['C', 'B', 'A']

    def test_identical_mixed_parents_keep_their_mix(self):
        sire = [_entry('A', 50), _entry('B', 50)]
        dam = [_entry('A', 50), _entry('B', 50)]

        child = calculate_child_breed_composition(sire, dam)

        assert child == [_entry('A', '50.0'), _entry('B', '50.0')]

    def test_only_sire_known_halves_in_order(self):
        sire = [_entry('A', 25), _entry('B', 75)]

        child = calculate_child_breed_composition(sire, None)

        assert child == [_entry('A', '12.5'), _entry('B', '37.5')]

    def test_only_dam_known(self):
        child = calculate_child_breed_composition([], [_entry('B', 100)])

        assert child == [_entry('B', '50.0')]

    def test_no_parents_gives_empty(self):
        assert calculate_child_breed_composition(None, None) == []
        assert calculate_child_breed_composition([], []) == []

    def test_zero_entries_dropped(self):
        sire = [_entry('A', 100), _entry('Z', 0)]
        dam = [_entry('B', 100)]

        child = calculate_child_breed_composition(sire, dam)

        assert 'Z' not in [entry['breed_id'] for entry in child]

    def test_rounds_half_up(self):
        sire = [_entry('A', '33.3'), _entry('B', '66.7')]
        dam = [_entry('A', 100)]

        child = calculate_child_breed_composition(sire, dam)

        # 16.65 + 50 = 66.65 -> 66.7, 33.35 -> 33.4
        assert child == [_entry('A', '66.7'), _entry('B', '33.4')]

    def test_accepts_floats(self):
        child = calculate_child_breed_composition(
            [{'breed_id': 'A', 'percentage': 100.0}],
            [{'breed_id': 'B', 'percentage': 100}],
        )

        assert get_total_percentage(child) == Decimal('100.0')


class TestCompositionHelpers:
    """Tests for totals, normalization and primary breed."""

    def test_round_percentage(self):
        assert round_percentage('12.25') == Decimal('12.3')
        assert round_percentage(None) == Decimal('0.0')

    def test_total_and_complete(self):
        composition = [_entry('A', '62.5'), _entry('B', '37.5')]

        assert get_total_percentage(composition) == Decimal('100.0')
        assert is_complete(composition) is True
        assert is_complete([_entry('A', 50)]) is False
        assert get_total_percentage(None) == Decimal('0')

    def test_normalize_rescales_to_hundred(self):
        normalized = normalize_breed_percentages([_entry('A', 25), _entry('B', 25)])

        assert normalized == [_entry('A', '50.0'), _entry('B', '50.0')]

    def test_normalize_empty(self):
        assert normalize_breed_percentages([]) == []
        assert normalize_breed_percentages(None) == []

    def test_normalize_zero_total(self):
        assert normalize_breed_percentages([_entry('A', 0)]) == []

    def test_primary_breed_first_wins_ties(self):
        composition = [_entry('A', 50), _entry('B', 50)]

        assert get_primary_breed(composition)['breed_id'] == 'A'
        assert get_primary_breed([]) is None
