"""Building blocks for NXDN network services: framing, UDP links, lookup, config and logging."""

__version__ = "0.1.0"

__all__ = ["__version__"]