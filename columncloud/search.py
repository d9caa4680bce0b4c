"""Index searches in sorted sequences."""

from bisect import bisect_left, bisect_right


def lower_bound_index(values, value):
    """Index of the first element not less than ``value``."""
    return bisect_left(values, value)


def upper_bound_index(values, value):
    """Index of the first element greater than ``value``."""
    return bisect_right(values, value)


def indexes(slvl, sprf):
    """Upper-bound index in ``slvl`` for every value of ``sprf``."""
    return [upper_bound_index(slvl, s) for s in sprf]


def left_index(values, x):
    """Index of the last element strictly less than ``x`` (-1 if none)."""
    return lower_bound_index(values, x) - 1


def right_index(values, x):
    """Index of the first element not less than ``x``."""
    return lower_bound_index(values, x)


def left_index_min_zero(values, x):
    """Like :func:`left_index` but never below zero."""
    return max(left_index(values, x), 0)


def left_index_min_zero_max_smallerlast(values, x):
    """Left index clamped so that ``index + 1`` is still a valid index."""
    index = left_index_min_zero(values, x)
    if index == len(values) - 1:
        index -= 1
    return index