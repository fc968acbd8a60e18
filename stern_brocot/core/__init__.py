from .node import Node, ZERO_OVER_ONE, ONE_OVER_ZERO, ONE_OVER_ONE
from .fraction import Fraction
from .store import NodeStore
