"""Search procedures used by the Dinic loop."""

from dinicflow.algorithms.bottleneck import (
    SearchScratch,
    augment_max_bottleneck_path,
    find_max_bottleneck_path,
)
from dinicflow.algorithms.levels import UNREACHED, build_level_graph

__all__ = [
    "SearchScratch",
    "UNREACHED",
    "augment_max_bottleneck_path",
    "build_level_graph",
    "find_max_bottleneck_path",
]
