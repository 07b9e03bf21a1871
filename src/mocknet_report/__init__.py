"""
Mocknet Report - Text diagnostics for simulated peer-to-peer networks.

This package renders human-readable snapshots of:
- The link topology of a simulated network (mocknet)
- The live connection set of a single network endpoint

Reports are written to any injected writable sink (stdout, a file,
an in-memory buffer).
"""

__version__ = "0.1.0"

from mocknet_report.printer import Printer, format_links, format_conns
from mocknet_report.snapshot import (
    Link,
    TopologySnapshot,
    ConnRecord,
    NetworkSnapshot,
    load_topology,
    load_network,
)
from mocknet_report.config import ReportConfig

__all__ = [
    "Printer",
    "format_links",
    "format_conns",
    "Link",
    "TopologySnapshot",
    "ConnRecord",
    "NetworkSnapshot",
    "load_topology",
    "load_network",
    "ReportConfig",
]
