from collections.abc import Iterable

from citysearch.data import CitySuggestion, RawSuggestion


def deduplicate(suggestions: Iterable[RawSuggestion | CitySuggestion]) -> list[CitySuggestion]:
    """Collapse suggestions sharing a display name, keeping the first of each.

    Accepts already-built ``CitySuggestion`` values too, so applying it to its
    own output returns the same list.
    """
    seen: set[str] = set()
    unique: list[CitySuggestion] = []
    for item in suggestions:
        city = item if isinstance(item, CitySuggestion) else CitySuggestion.from_raw(item)
        if city.full_name not in seen:
            seen.add(city.full_name)
            unique.append(city)
    return unique
