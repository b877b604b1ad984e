from citysearch.state.selection import SelectionState
from citysearch.state.store import ViewState, ViewStateStore

__all__ = [
    "SelectionState",
    "ViewState",
    "ViewStateStore",
]
