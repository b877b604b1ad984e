"""Process-local view state shared between the search core and the view layer.

All mutation goes through the named methods below. Writes that belong to an
asynchronous operation carry a token (input generation or search epoch) and
are dropped when the token has been superseded, so a slow response can never
overwrite state produced by newer input.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from citysearch.data import AggregatedResult, CitySuggestion, SearchLifecycleState
from citysearch.errors import GENERIC_FAILURE_MESSAGE
from citysearch.state.selection import SelectionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewState:
    """Immutable snapshot handed to the presentation layer."""

    query: str = ""
    suggestions: tuple[CitySuggestion, ...] = ()
    selection: CitySuggestion | None = None
    result: AggregatedResult | None = None
    lifecycle: SearchLifecycleState = SearchLifecycleState.IDLE
    error: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.lifecycle is SearchLifecycleState.LOADING

    @property
    def can_search(self) -> bool:
        """Whether the search trigger should be enabled."""
        return self.selection is not None and not self.is_loading


Listener = Callable[[ViewState], None]


class ViewStateStore:
    """Mutable holder for suggestions, selection, result, lifecycle and error."""

    def __init__(self) -> None:
        self._query = ""
        self._suggestions: tuple[CitySuggestion, ...] = ()
        self._selection = SelectionState()
        self._result: AggregatedResult | None = None
        self._lifecycle = SearchLifecycleState.IDLE
        self._error: str | None = None
        self._input_generation = 0
        self._search_epoch = 0
        self._listeners: list[Listener] = []

    @property
    def selection(self) -> SelectionState:
        return self._selection

    @property
    def lifecycle(self) -> SearchLifecycleState:
        return self._lifecycle

    @property
    def input_generation(self) -> int:
        return self._input_generation

    @property
    def search_epoch(self) -> int:
        return self._search_epoch

    def snapshot(self) -> ViewState:
        return ViewState(
            query=self._query,
            suggestions=self._suggestions,
            selection=self._selection.current,
            result=self._result,
            lifecycle=self._lifecycle,
            error=self._error,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` to receive a snapshot after every change.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- input and selection --

    def clear_on_edit(self, text: str) -> int:
        """Record an input edit and invalidate everything derived from old input.

        Clears selection, suggestions, result and error. A search still in
        flight is superseded and the lifecycle returns to IDLE.

        Returns:
            The new input generation.
        """
        self._query = text
        self._selection.clear()
        self._suggestions = ()
        self._result = None
        self._error = None
        self._input_generation += 1
        if self._lifecycle is SearchLifecycleState.LOADING:
            self._search_epoch += 1
            self._lifecycle = SearchLifecycleState.IDLE
        self._notify()
        return self._input_generation

    def select(self, suggestion: CitySuggestion) -> None:
        """Confirm ``suggestion`` and close the suggestion list.

        The input text becomes the suggestion's display name; this does not
        count as an edit.
        """
        self._selection.select(suggestion)
        self._query = suggestion.full_name
        self._suggestions = ()
        self._error = None
        self._notify()

    def set_suggestions(self, generation: int, suggestions: list[CitySuggestion]) -> bool:
        """Publish suggestions computed for input ``generation``.

        Returns:
            False if newer input arrived meanwhile and the write was dropped.
        """
        if generation != self._input_generation:
            logger.debug(
                "Dropping stale suggestions (generation %d, current %d)",
                generation,
                self._input_generation,
            )
            return False
        if self._selection.current is not None:
            return False
        self._suggestions = tuple(suggestions)
        self._notify()
        return True

    def set_error(self, message: str | None) -> None:
        self._error = message
        self._notify()

    # -- search lifecycle --

    def begin_search(self) -> int:
        """Enter LOADING and return the epoch identifying this search."""
        self._search_epoch += 1
        self._lifecycle = SearchLifecycleState.LOADING
        self._notify()
        return self._search_epoch

    def complete_search(self, epoch: int, result: AggregatedResult) -> bool:
        if epoch != self._search_epoch:
            return False
        self._result = result
        self._error = None
        self._lifecycle = SearchLifecycleState.SUCCEEDED
        self._notify()
        return True

    def fail_search(self, epoch: int, message: str = GENERIC_FAILURE_MESSAGE) -> bool:
        if epoch != self._search_epoch:
            return False
        self._result = None
        self._error = message
        self._lifecycle = SearchLifecycleState.FAILED
        self._notify()
        return True

    def finish_search(self, epoch: int) -> None:
        """Guarantee the search identified by ``epoch`` has left LOADING.

        A search that ended without recording an outcome counts as failed.
        """
        if epoch == self._search_epoch and self._lifecycle is SearchLifecycleState.LOADING:
            self.fail_search(epoch)

    def _notify(self) -> None:
        if not self._listeners:
            return
        state = self.snapshot()
        for listener in list(self._listeners):
            listener(state)
