"""
Asynchronous control flow, three ways.

    from lessons.asyncflow import callback, promise, suspend

    callback.fetch_data(lambda err, data: print(err or data))
    result = await promise.fetch_data()()      # Ok("Data loaded!")
    data = await suspend.fetch_data()          # "Data loaded!"

All three share one MockSource timer and are observably equivalent.
"""

from . import callback, gather, promise, suspend
from .gather import load_all, load_all_result
from .source import DATA_LOADED, MockSource

__all__ = (
    # Styles (namespaces)
    "callback",
    "promise",
    "suspend",
    "gather",
    # Source
    "DATA_LOADED",
    "MockSource",
    # All-style
    "load_all",
    "load_all_result",
)
