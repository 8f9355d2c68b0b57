"""List GitHub owners' repositories over GraphQL and check a host is ready to mirror them."""

__version__ = "0.1.4"