"""
Collaborator interfaces consumed by the printer.

The simulated-network engine, the real network stack and the output sink
all live outside this package. These protocols describe the small surface
the printer relies on.
"""
from typing import Iterable, Mapping, Protocol, Sized, runtime_checkable


@runtime_checkable
class Stringable(Protocol):
    """Anything that renders to a stable string via ``str()``."""

    def __str__(self) -> str:
        ...


@runtime_checkable
class Sink(Protocol):
    """An append-only text destination. ``write`` may raise."""

    def write(self, text: str) -> int:
        ...


LinkMap = Mapping[Stringable, Mapping[Stringable, Sized]]


@runtime_checkable
class Mocknet(Protocol):
    """A simulated network able to expose its link topology."""

    def links(self) -> LinkMap:
        """Return the topology as source peer -> dest peer -> links."""
        ...


@runtime_checkable
class Conn(Protocol):
    """A single live connection to a remote peer."""

    def remote_peer(self) -> Stringable:
        ...

    def remote_multiaddr(self) -> Stringable:
        ...


@runtime_checkable
class Network(Protocol):
    """A network endpoint and its currently open connections."""

    def local_peer(self) -> Stringable:
        ...

    def conns(self) -> Iterable[Conn]:
        ...
