#!/usr/bin/env python3

# Centered interval tree node

import bisect
from operator import attrgetter

from .interval import Relation

_begin = attrgetter("begin")
_end   = attrgetter("end")


class Node:
    # s_center spans x_center; left ends before it, right begins after it
    __slots__ = ['x_center', 's_center', 'begin_sorted', 'end_sorted',
                 'left', 'right', '_begins', '_ends']

    def __init__(self, x_center, s_center, left=None, right=None):
        self.x_center     = x_center
        self.s_center     = tuple(s_center)
        self.begin_sorted = tuple(sorted(self.s_center, key=_begin))
        self.end_sorted   = tuple(sorted(self.s_center, key=_end))
        self.left         = left
        self.right        = right
        self._begins      = [i.begin for i in self.begin_sorted]
        self._ends        = [i.end for i in self.end_sorted]

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return (self.x_center     == other.x_center and
                self.begin_sorted == other.begin_sorted and
                self.end_sorted   == other.end_sorted and
                self.left         == other.left and
                self.right        == other.right)

    __hash__ = None

    def __repr__(self):
        return f"Node({self.x_center!r}, {list(self.s_center)!r}, {self.left!r}, {self.right!r})"

    def __iter__(self):
        yield from self.s_center
        if self.left is not None:
            yield from self.left
        if self.right is not None:
            yield from self.right

    def search(self, query, relation=Relation.OVERLAPS):
        relation = Relation.coerce(relation)
        if relation is Relation.OVERLAPS:
            result = self._center_overlaps(query)
        else:
            result = [i for i in self.s_center if relation.matches(i, query)]

        if self.left is not None and query.begin < self.x_center:
            result += self.left.search(query, relation)
        if self.right is not None and query.end > self.x_center:
            result += self.right.search(query, relation)
        return result

    def search_point(self, point):
        result = [i for i in self.s_center if i.begin <= point < i.end]
        if point < self.x_center:
            if self.left is not None:
                result += self.left.search_point(point)
        elif self.right is not None:
            result += self.right.search_point(point)
        return result

    def _center_overlaps(self, query):
        if query.end <= self.x_center:
            # query left of center: every end reaches past it
            boundary = bisect.bisect_left(self._begins, query.end)
            return list(self.begin_sorted[:boundary])
        elif query.begin >= self.x_center:
            # query right of center: every begin precedes it
            boundary = bisect.bisect_right(self._ends, query.begin)
            return list(self.end_sorted[boundary:])
        else:
            return list(self.s_center)
