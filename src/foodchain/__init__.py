"""Food supply chain ledger simulator."""

__version__ = "0.1.0"
