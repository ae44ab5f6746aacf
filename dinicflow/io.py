"""Edge-list text format for flow networks.

The format is line oriented::

    4
    0 1 10
    0 2 5
    1 3 5
    2 3 10

The first non-blank line is the node count ``N``. Every following line with
exactly three whitespace-separated fields is an edge ``from to capacity``;
lines with any other number of fields are ignored. Unless overridden, the
source is node ``0`` and the sink is node ``N - 1``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

from dinicflow.exceptions import EdgeListFormatError
from dinicflow.graph.network import FlowNetwork
from dinicflow.logging import get_logger

logger = get_logger(__name__)


def _parse_int(token: str, what: str, line_no: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise EdgeListFormatError(f"invalid {what} {token!r}", line_no) from None


def parse_edge_list(
    lines: Iterable[str],
    source: Optional[int] = None,
    sink: Optional[int] = None,
) -> FlowNetwork:
    """Build a network from edge-list lines.

    Args:
        lines: Text lines, e.g. an open file.
        source: Source node; defaults to 0.
        sink: Sink node; defaults to the last node.

    Returns:
        FlowNetwork: A network with every parsed edge inserted in file order.

    Raises:
        EdgeListFormatError: If the header is missing or a number is malformed.
        InvalidTopology: If an edge endpoint, source or sink is out of range.
        InvalidCapacity: If an edge capacity is not positive.
    """
    network: Optional[FlowNetwork] = None
    edge_count = 0

    for line_no, raw in enumerate(lines, start=1):
        parts = raw.split()
        if network is None:
            if not parts:
                continue
            if len(parts) != 1:
                raise EdgeListFormatError(
                    f"expected node count, got {raw.strip()!r}", line_no
                )
            num_nodes = _parse_int(parts[0], "node count", line_no)
            network = FlowNetwork(
                num_nodes,
                0 if source is None else source,
                num_nodes - 1 if sink is None else sink,
            )
            logger.debug("Network has %d nodes", num_nodes)
            continue

        if len(parts) != 3:
            if parts:
                logger.debug("Skipping line %d: %r", line_no, raw.strip())
            continue
        src = _parse_int(parts[0], "node", line_no)
        dst = _parse_int(parts[1], "node", line_no)
        capacity = _parse_int(parts[2], "capacity", line_no)
        network.add_edge(src, dst, capacity)
        edge_count += 1

    if network is None:
        raise EdgeListFormatError("empty input: missing node count")

    logger.debug("Parsed %d edges", edge_count)
    return network


def read_edge_list(
    path: Union[str, Path],
    source: Optional[int] = None,
    sink: Optional[int] = None,
) -> FlowNetwork:
    """Read a network from an edge-list file. See ``parse_edge_list``."""
    path = Path(path)
    logger.info(f"Reading network from: {path}")
    with path.open("r", encoding="utf-8") as fh:
        return parse_edge_list(fh, source=source, sink=sink)


def network_to_edge_list(network: FlowNetwork) -> List[str]:
    """Render the user edges of ``network`` as edge-list lines.

    Source and sink are not encoded; the output re-reads with the default
    endpoints only when the network uses ``0`` and ``N - 1``.
    """
    lines = [str(network.num_nodes)]
    lines.extend(
        f"{edge.src} {edge.dst} {edge.capacity}" for edge in network.forward_edges()
    )
    return lines
