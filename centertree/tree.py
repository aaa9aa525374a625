#!/usr/bin/env python3

# Static centered interval tree

import numbers
from fractions import Fraction
from itertools import groupby

import numpy

from .interval import (Interval, InvalidIntervalError, Relation, default_factory,
                       is_query_range, is_range_like, normalize)
from .node import Node


def _sort_key(interval):
    return (interval.begin, interval.end)


def center(intervals):
    # numbers are summed as fractions so the center never rounds across a boundary
    low = min(i.begin for i in intervals)
    high = max(i.end for i in intervals)
    if isinstance(low, numbers.Number) and isinstance(high, numbers.Number):
        return (Fraction(low) + Fraction(high)) / 2
    return low + (high - low) / 2


def construct(intervals):
    if not intervals:
        return None
    x_center = center(intervals)
    s_center = []
    s_left   = []
    s_right  = []
    for k in intervals:
        if k.end < x_center:
            s_left.append(k)
        elif k.begin > x_center:
            s_right.append(k)
        else:
            s_center.append(k)
    return Node(x_center, s_center, construct(s_left), construct(s_right))


def dedupe(intervals):
    # input is sorted by (begin, end), so equal intervals share a group
    result = []
    for _, group in groupby(intervals, key=_sort_key):
        seen = set()
        kept = []
        for i in group:
            try:
                if i in seen:
                    continue
                seen.add(i)
            except TypeError:
                # unhashable payload
                if i in kept:
                    continue
            kept.append(i)
        result += kept
    return result


class IntervalTree:
    """Static interval tree over half-open intervals."""

    def __init__(self, intervals=(), factory=None):
        self.factory = factory or default_factory
        if is_range_like(intervals):
            intervals = [intervals]
        self.top_node = construct([normalize(i, self.factory) for i in intervals])

    @classmethod
    def from_arrays(cls, begins, ends):
        # each interval carries its row index as data
        t0s = numpy.asarray(begins)
        t1s = numpy.asarray(ends)
        if t0s.ndim != 1 or t0s.shape != t1s.shape:
            raise InvalidIntervalError(
                f"begins and ends must be 1-d arrays of equal length, got {t0s.shape} and {t1s.shape}")
        bad = numpy.flatnonzero(numpy.logical_not(t0s < t1s))
        if len(bad):
            row = int(bad[0])
            raise InvalidIntervalError(
                f"row {row}: interval begin must be less than end: ({t0s[row]!r}, {t1s[row]!r})")
        return cls(Interval(t0, t1, idx)
                   for idx, (t0, t1) in enumerate(zip(t0s.tolist(), t1s.tolist())))

    def __eq__(self, other):
        if not isinstance(other, IntervalTree):
            return NotImplemented
        return self.top_node == other.top_node

    __hash__ = None

    def __len__(self):
        if self.top_node is None:
            return 0
        return sum(1 for _ in self.top_node)

    def __iter__(self):
        if self.top_node is None:
            return iter(())
        return iter(sorted(self.top_node, key=_sort_key))

    def __repr__(self):
        return f"IntervalTree({list(self)!r})"

    def query(self, query, unique=True, relation=Relation.OVERLAPS):
        # None for an empty tree; relation applies to range queries only
        if self.top_node is None:
            return None

        if is_query_range(query):
            result = self.top_node.search(normalize(query, self.factory), relation)
        else:
            result = self.top_node.search_point(query)

        result.sort(key=_sort_key)
        if unique:
            return dedupe(result)
        return result

    def overlaps(self, query):
        return self.query(query, relation=Relation.OVERLAPS)

    def covers(self, query):
        return self.query(query, relation=Relation.COVERS)

    def covered_by(self, query):
        return self.query(query, relation=Relation.COVERED_BY)
