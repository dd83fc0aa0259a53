"""Domain exceptions."""


class StoreUnavailable(Exception):
    """The counter store could not be reached or read.

    Recoverable: the server answers 500, the stats client falls back to the
    next store in its chain.
    """
