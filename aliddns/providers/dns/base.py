"""Abstract base class for DNS providers."""

from abc import ABC, abstractmethod

from aliddns.models import DNSRecord


class DNSProvider(ABC):
    """Abstract DNS provider interface."""

    @abstractmethod
    def lookup_record(self, domain: str, rr: str, record_type: str) -> DNSRecord | None:
        """Look up the record of one subdomain and type.

        Args:
            domain: The domain name (e.g., "example.com")
            rr: The record label (e.g., "ddns" or "@" for root)
            record_type: "A" or "AAAA"

        Returns:
            The existing record, or None if there is none
        """
        pass

    @abstractmethod
    def upsert_record(
        self,
        domain: str,
        rr: str,
        value: str,
        record_type: str,
        record_id: str | None = None,
    ) -> DNSRecord:
        """Create a record, or update it when its ID is known.

        Args:
            domain: The domain name (e.g., "example.com")
            rr: The record label (e.g., "ddns" or "@" for root)
            value: The address to point to
            record_type: "A" or "AAAA"
            record_id: ID of the existing record to update; None creates one

        Returns:
            The record as stored by the provider
        """
        pass

    def close(self) -> None:
        """Release any resources held by the provider."""

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
