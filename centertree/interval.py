#!/usr/bin/env python3

# Interval shapes, relations and normalization

import enum
from collections import namedtuple


class Interval(namedtuple("Interval", ["begin", "end", "data"], defaults=[None])):
    """Half-open range [begin, end) with an optional payload."""
    __slots__ = ()
    exclude_end = True


class Closed(namedtuple("Closed", ["begin", "end"])):
    """Inclusive-end range, converted by the interval factory."""
    __slots__ = ()
    exclude_end = False


class CentertreeError(Exception):
    pass


class InvalidIntervalError(CentertreeError, ValueError):
    pass


def default_factory(begin, end):
    return Interval(begin, end + 1)


def _overlaps(stored, query):
    return query.begin < stored.end and query.end > stored.begin

def _covers(stored, query):
    return stored.begin <= query.begin and stored.end >= query.end

def _covered_by(stored, query):
    return stored.begin >= query.begin and stored.end <= query.end


class Relation(enum.Enum):
    OVERLAPS   = "overlaps"
    COVERS     = "covers"
    COVERED_BY = "covered_by"

    def matches(self, stored, query):
        return _PREDICATES[self](stored, query)

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        return cls(value)

_PREDICATES = {
    Relation.OVERLAPS   : _overlaps,
    Relation.COVERS     : _covers,
    Relation.COVERED_BY : _covered_by,
}


def is_range_like(value):
    if isinstance(value, range):
        return True
    return hasattr(value, "begin") and hasattr(value, "end")


def is_query_range(value):
    # bare pairs are accepted as query ranges, not only range-likes
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return True
    return is_range_like(value)


def normalize(value, factory=default_factory):
    # exclusive-end values pass through, inclusive-end ones go through factory
    if isinstance(value, range):
        if value.step != 1:
            raise InvalidIntervalError(f"range with step {value.step} is not an interval: {value!r}")
        interval = Interval(value.start, value.stop)
    elif is_range_like(value):
        if getattr(value, "exclude_end", True):
            interval = value
        else:
            interval = factory(value.begin, value.end)
    elif isinstance(value, (tuple, list)) and len(value) == 2:
        interval = Interval(value[0], value[1])
    else:
        raise InvalidIntervalError(f"not an interval: {value!r}")

    if not interval.begin < interval.end:
        raise InvalidIntervalError(f"interval begin must be less than end: {value!r}")
    return interval
