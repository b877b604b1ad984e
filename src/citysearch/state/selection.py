from citysearch.data import CitySuggestion


class SelectionState:
    """Holds the single city the user has confirmed, if any."""

    def __init__(self) -> None:
        self._current: CitySuggestion | None = None

    @property
    def current(self) -> CitySuggestion | None:
        return self._current

    def select(self, suggestion: CitySuggestion) -> None:
        self._current = suggestion

    def clear(self) -> None:
        self._current = None
