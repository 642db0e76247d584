"""
Breed composition inheritance.

A breed composition is a list of ``{'breed_id': str, 'percentage': Decimal}``
entries describing a bird's ancestry. A chick inherits half of each parent's
composition: every breed contributes ``percentage / 100 * 50`` from the sire
and from the dam.

All functions here are pure. Percentages are rounded half-up to one decimal
place with ``Decimal`` so results do not depend on float representation.

Example::

    >>> calculate_child_breed_composition(
    ...     [{'breed_id': 'A', 'percentage': 100}],
    ...     [{'breed_id': 'B', 'percentage': 100}],
    ... )
    [{'breed_id': 'A', 'percentage': Decimal('50.0')},
     {'breed_id': 'B', 'percentage': Decimal('50.0')}]
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

ONE_DECIMAL = Decimal('0.1')
HUNDRED = Decimal('100')
PARENT_SHARE = Decimal('50')


def _as_decimal(value) -> Decimal:
    if value is None:
        return Decimal('0')
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_percentage(value) -> Decimal:
    """Round a percentage half-up to one decimal place."""
    return _as_decimal(value).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


def calculate_child_breed_composition(
    sire_composition: Optional[Iterable[dict]],
    dam_composition: Optional[Iterable[dict]],
) -> list[dict]:
    """
    Compute a chick's breed composition from its parents.

    Args:
        sire_composition: Sire's entries, or None/empty when unknown
        dam_composition: Dam's entries, or None/empty when unknown

    Returns:
        Child composition. With one known parent, that parent's entries
        halved in their original order. With both, per-breed sums of the
        halved contributions, zero entries dropped, largest first (ties
        keep sire-then-dam order).
    """
    sire = list(sire_composition or [])
    dam = list(dam_composition or [])

    if not sire and not dam:
        return []

    if not sire or not dam:
        known = sire or dam
        return [
            {
                'breed_id': entry['breed_id'],
                'percentage': round_percentage(_as_decimal(entry['percentage']) / 2),
            }
            for entry in known
        ]

    totals: dict[str, Decimal] = {}
    for entry in sire + dam:
        contribution = _as_decimal(entry['percentage']) / HUNDRED * PARENT_SHARE
        totals[entry['breed_id']] = totals.get(entry['breed_id'], Decimal('0')) + contribution

    child = [
        {'breed_id': breed_id, 'percentage': round_percentage(total)}
        for breed_id, total in totals.items()
    ]
    child = [entry for entry in child if entry['percentage'] > 0]

    return sorted(child, key=lambda entry: entry['percentage'], reverse=True)


def get_total_percentage(composition: Optional[Iterable[dict]]) -> Decimal:
    """Sum of all percentages in a composition."""
    return sum(
        (_as_decimal(entry['percentage']) for entry in composition or []),
        Decimal('0'),
    )


def normalize_breed_percentages(composition: Optional[Iterable[dict]]) -> list[dict]:
    """
    Rescale a composition so its percentages add up to 100.

    Returns an empty list when the total is zero.
    """
    entries = list(composition or [])
    total = get_total_percentage(entries)
    if total == 0:
        return []

    return [
        {
            'breed_id': entry['breed_id'],
            'percentage': round_percentage(_as_decimal(entry['percentage']) / total * HUNDRED),
        }
        for entry in entries
    ]


def get_primary_breed(composition: Optional[Iterable[dict]]) -> Optional[dict]:
    """Entry with the largest share, first one wins on ties."""
    primary = None
    for entry in composition or []:
        if primary is None or _as_decimal(entry['percentage']) > _as_decimal(primary['percentage']):
            primary = entry
    return primary


def is_complete(composition: Optional[Iterable[dict]]) -> bool:
    """True when the percentages account for the whole bird."""
    return get_total_percentage(composition) == HUNDRED
