"""Error taxonomy for search orchestration."""

GENERIC_FAILURE_MESSAGE = "Could not fetch data for that city."
NO_SELECTION_MESSAGE = "Please select a city from the list."


class CitySearchError(Exception):
    """Base class for errors surfaced by the search core.

    ``user_message`` is the text published to the view state when this error
    ends a search trigger; the exception message and ``__cause__`` are for
    diagnostics.
    """

    user_message: str = GENERIC_FAILURE_MESSAGE


class ValidationError(CitySearchError):
    """The user must act before a search can run (e.g. no city selected)."""

    user_message = NO_SELECTION_MESSAGE


class SearchInProgressError(CitySearchError):
    """A search was triggered while another one is still loading."""

    user_message = "A search is already in progress."


class ProviderError(CitySearchError):
    """An upstream provider call failed.

    Args:
        step: Name of the pipeline step (e.g. "weather", "events").
        cause: The underlying exception.
    """

    def __init__(self, step: str, cause: BaseException) -> None:
        super().__init__(f"{step} provider failed: {cause}")
        self.step = step
        self.cause = cause
