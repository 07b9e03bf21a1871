"""
In-memory snapshots implementing the collaborator interfaces.

These let a test harness or the command line build a topology or a
connection set without a running network engine.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence


@dataclass(frozen=True)
class Link:
    """Placeholder handle for one simulated link between two peers."""
    peer_a: str
    peer_b: str

    def __str__(self) -> str:
        return f"{self.peer_a}<->{self.peer_b}"


@dataclass
class TopologySnapshot:
    """A point-in-time link map: source peer -> dest peer -> links."""
    links_map: Dict[str, Dict[str, Sequence[Any]]] = field(default_factory=dict)

    def links(self) -> Dict[str, Dict[str, Sequence[Any]]]:
        """Return the link map."""
        return self.links_map

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TopologySnapshot":
        """
        Build a snapshot from a plain mapping.

        Inner values may be a list of link descriptors, kept as opaque
        handles, or a non-negative link count.

        Args:
            data: Mapping of source peer -> dest peer -> links or count

        Returns:
            TopologySnapshot instance
        """
        if not isinstance(data, dict):
            raise ValueError("Topology must be a mapping of peer to peer links")

        links_map: Dict[str, Dict[str, Sequence[Any]]] = {}
        for src, dests in data.items():
            if not isinstance(dests, dict):
                raise ValueError(f"Links for peer {src} must be a mapping")

            links_map[str(src)] = {}
            for dst, value in dests.items():
                links_map[str(src)][str(dst)] = _expand_links(str(src), str(dst), value)

        return cls(links_map=links_map)


def _expand_links(src: str, dst: str, value: Any) -> Sequence[Any]:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool):
        raise ValueError(f"Invalid links for {src} -> {dst}: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Negative link count for {src} -> {dst}: {value}")
        return tuple(Link(src, dst) for _ in range(value))
    if isinstance(value, list):
        return tuple(value)
    raise ValueError(f"Invalid links for {src} -> {dst}: {value!r}")


@dataclass(frozen=True)
class ConnRecord:
    """One open connection as seen from the local endpoint."""
    remote: str
    remote_addr: str

    def remote_peer(self) -> str:
        return self.remote

    def remote_multiaddr(self) -> str:
        return self.remote_addr


@dataclass
class NetworkSnapshot:
    """A point-in-time view of one endpoint's connections."""
    local: str
    connections: List[ConnRecord] = field(default_factory=list)

    def local_peer(self) -> str:
        return self.local

    def conns(self) -> List[ConnRecord]:
        return self.connections

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NetworkSnapshot":
        """
        Build a snapshot from a plain mapping.

        Expected shape::

            {"local_peer": "X",
             "conns": [{"remote_peer": "Y", "remote_addr": "/ip4/1.2.3.4/tcp/4001"}]}

        Args:
            data: Snapshot mapping

        Returns:
            NetworkSnapshot instance
        """
        if not isinstance(data, dict) or "local_peer" not in data:
            raise ValueError("Connection snapshot requires a local_peer")

        connections = []
        for i, conn in enumerate(data.get("conns") or []):
            try:
                connections.append(
                    ConnRecord(remote=str(conn["remote_peer"]), remote_addr=str(conn["remote_addr"]))
                )
            except (KeyError, TypeError):
                raise ValueError(
                    f"Connection {i} needs remote_peer and remote_addr"
                ) from None

        return cls(local=str(data["local_peer"]), connections=connections)


def load_topology(path: str) -> TopologySnapshot:
    """Load a topology snapshot from a JSON file."""
    with open(path, "r") as f:
        return TopologySnapshot.from_dict(json.load(f))


def load_network(path: str) -> NetworkSnapshot:
    """Load a connection snapshot from a JSON file."""
    with open(path, "r") as f:
        return NetworkSnapshot.from_dict(json.load(f))
