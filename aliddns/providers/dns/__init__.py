"""DNS provider implementations."""

from aliddns.providers.dns.alidns import AliDNSProvider
from aliddns.providers.dns.base import DNSProvider

__all__ = ["AliDNSProvider", "DNSProvider"]
