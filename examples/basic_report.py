"""
Example: Printing a link map and connection set for a small simulated network.
"""
import sys
from mocknet_report import Printer, TopologySnapshot, NetworkSnapshot, ConnRecord


def main():
    """Render both reports for a three-peer mocknet."""
    topology = TopologySnapshot.from_dict({
        "QmPeerA": {"QmPeerB": 2, "QmPeerC": 1},
        "QmPeerB": {"QmPeerA": 2},
        "QmPeerC": {"QmPeerA": 1},
    })

    endpoint = NetworkSnapshot(
        local="QmPeerA",
        connections=[
            ConnRecord("QmPeerB", "/ip4/127.0.0.1/tcp/4001"),
            ConnRecord("QmPeerC", "/ip4/127.0.0.1/tcp/4002"),
        ],
    )

    printer = Printer(sys.stdout)
    printer.mocknet_links(topology)
    printer.network_conns(endpoint)


if __name__ == "__main__":
    main()
