"""Stats client exceptions."""


class StatsApiError(Exception):
    """The stats service answered badly or not at all.

    Covers transport errors, non-2xx statuses and malformed bodies alike:
    for fallback purposes they are the same failure.
    """
