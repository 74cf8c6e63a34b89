"""aliddns - keep an AliDNS A/AAAA record pointed at this machine."""

__version__ = "0.1.0"
