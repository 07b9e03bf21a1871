"""
Text rendering of mocknet topologies and endpoint connection sets.
"""
import io
import logging
from collections.abc import Mapping
from typing import Union

import structlog

from mocknet_report.interfaces import LinkMap, Mocknet, Network, Sink


class Printer:
    """
    Writes diagnostic reports to a sink.

    The sink is borrowed, not owned: the printer never opens, buffers,
    flushes or closes it. Each line is written as soon as it is formatted,
    so a failing sink leaves a partial report behind and the error
    propagates to the caller unchanged.
    """

    def __init__(self, sink: Sink):
        """
        Initialize printer.

        Args:
            sink: Writable text destination (anything with ``write(str)``)
        """
        self.sink = sink
        self.logger = structlog.wrap_logger(logging.getLogger(__name__))

    def mocknet_links(self, mocknet: Union[Mocknet, LinkMap]):
        """
        Write the link map of a simulated network.

        Args:
            mocknet: Either an engine exposing ``links()`` or the
                peer -> peer -> links mapping itself
        """
        links = mocknet if isinstance(mocknet, Mapping) else mocknet.links()
        self.logger.debug("rendering_link_map", peers=len(links))

        self.sink.write("Mocknet link map:\n")
        for p1, dests in links.items():
            self.sink.write(f"\t{p1} linked to:\n")
            for p2, peer_links in dests.items():
                self.sink.write(f"\t\t{p2} ({len(peer_links)} links)\n")
        self.sink.write("\n")

    def network_conns(self, network: Network):
        """
        Write the connection set of one network endpoint.

        Connections are listed in the order ``conns()`` yields them.

        Args:
            network: Endpoint exposing ``local_peer()`` and ``conns()``
        """
        local = network.local_peer()
        conns = list(network.conns())
        self.logger.debug("rendering_conns", local_peer=str(local), conns=len(conns))

        self.sink.write(f"{local} connected to:\n")
        for c in conns:
            self.sink.write(f"\t{c.remote_peer()} (addr: {c.remote_multiaddr()})\n")
        self.sink.write("\n")


def format_links(mocknet: Union[Mocknet, LinkMap]) -> str:
    """Render a link map report and return it as a string."""
    buf = io.StringIO()
    Printer(buf).mocknet_links(mocknet)
    return buf.getvalue()


def format_conns(network: Network) -> str:
    """Render a connection report and return it as a string."""
    buf = io.StringIO()
    Printer(buf).network_conns(network)
    return buf.getvalue()
