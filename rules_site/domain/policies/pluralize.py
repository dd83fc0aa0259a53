"""Russian plural forms for the view counter label."""


def pluralize_views(count: int) -> str:
    """Return the form of "просмотр" that agrees with *count*.

    1, 21, 31 → просмотр; 2–4, 22–24 → просмотра; everything else,
    including 11–14, → просмотров.
    """
    count = abs(count)
    last_digit = count % 10
    last_two_digits = count % 100

    if 11 <= last_two_digits <= 14:
        return "просмотров"
    if last_digit == 1:
        return "просмотр"
    if 2 <= last_digit <= 4:
        return "просмотра"
    return "просмотров"
