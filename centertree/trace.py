#!/usr/bin/env python3

# Event trace loading
#
# A trace is a CSV of "rank0,t0,rank1,t1,kind" lines; each line is an event
# that starts on rank0 at t0 and ends on rank1 at t1.

import numpy

from .interval import CentertreeError, Interval
from .tree import IntervalTree

COLUMNS = ['rank0', 't0', 'rank1', 't1', 'kind']


class TraceFormatError(CentertreeError, ValueError):
    pass


def parse_line(line, lineno):
    d = line.split(",")
    if len(d) != len(COLUMNS):
        raise TraceFormatError(f"line {lineno}: expected {len(COLUMNS)} fields, got {len(d)}")
    try:
        event = (int(d[0]), float(d[1]), int(d[2]), float(d[3]), d[4])
    except ValueError as e:
        raise TraceFormatError(f"line {lineno}: {e}") from e
    if event[3] < event[1]:
        raise TraceFormatError(f"line {lineno}: event ends at {event[3]} before it starts at {event[1]}")
    return event


def read_trace(path):
    # columns sorted by start time, plus 'duration'
    with open(path) as f:
        events = [parse_line(s.strip(), lineno)
                  for lineno, s in enumerate(f, 1) if s.strip()]

    events.sort(key=lambda x: x[1])

    data_lists = {k: [e[i] for e in events] for i, k in enumerate(COLUMNS)}
    data_lists['duration'] = [t1-t0 for t0, t1 in zip(data_lists['t0'], data_lists['t1'])]
    return data_lists


def build_tree(data_lists):
    t0s = numpy.asarray(data_lists['t0'], dtype=float)
    t1s = numpy.asarray(data_lists['t1'], dtype=float)
    # instantaneous events get the smallest float width
    t1s = numpy.where(t1s == t0s, numpy.nextafter(t0s, numpy.inf), t1s)
    return IntervalTree.from_arrays(t0s, t1s)


def visible_rows(tree, x_start, x_end):
    if not x_start < x_end:
        return []
    matches = tree.overlaps(Interval(x_start, x_end))
    if matches is None:
        return []
    return sorted(i.data for i in matches)
