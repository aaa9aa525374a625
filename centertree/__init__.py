from .interval import (CentertreeError, Closed, Interval, InvalidIntervalError, Relation,
                       default_factory, normalize)
from .node import Node
from .tree import IntervalTree
