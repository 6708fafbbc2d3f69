"""Favorite locations, keyed by coordinate."""

from collections.abc import Sequence

from skycast.models.location import Location


def toggle_favorite(favorites: Sequence[Location], location: Location) -> list[Location]:
    """Remove the first coordinate-equal entry, or append the location.

    Returns a new list; survivors keep their insertion order.
    """
    updated = list(favorites)
    if location in updated:
        updated.remove(location)
    else:
        updated.append(location)
    return updated


def is_favorite(favorites: Sequence[Location], location: Location) -> bool:
    return location in favorites
