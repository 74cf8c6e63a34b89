"""Data models shared across aliddns components."""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from rich.markup import escape

_IPV4_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9]?[0-9])"
_IPV4 = rf"(?:{_IPV4_OCTET}\.){{3}}{_IPV4_OCTET}"
_H16 = r"[0-9a-fA-F]{1,4}"
_LS32 = rf"(?:{_H16}:{_H16}|{_IPV4})"
# RFC 3986 IPv6address, one alternative per ABNF line
_IPV6 = "|".join(
    [
        rf"(?:{_H16}:){{6}}{_LS32}",
        rf"::(?:{_H16}:){{5}}{_LS32}",
        rf"(?:{_H16})?::(?:{_H16}:){{4}}{_LS32}",
        rf"(?:(?:{_H16}:){{0,1}}{_H16})?::(?:{_H16}:){{3}}{_LS32}",
        rf"(?:(?:{_H16}:){{0,2}}{_H16})?::(?:{_H16}:){{2}}{_LS32}",
        rf"(?:(?:{_H16}:){{0,3}}{_H16})?::{_H16}:{_LS32}",
        rf"(?:(?:{_H16}:){{0,4}}{_H16})?::{_LS32}",
        rf"(?:(?:{_H16}:){{0,5}}{_H16})?::{_H16}",
        rf"(?:(?:{_H16}:){{0,6}}{_H16})?::",
    ]
)
# RFC 6874 zone id
_ZONE = r"%[0-9A-Za-z._~-]+"

IPV4_PATTERN = re.compile(_IPV4)
IPV6_PATTERN = re.compile(rf"(?:{_IPV6})(?:{_ZONE})?")


class AddressFamily(str, Enum):
    """Internet address family handled by the updater."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"

    @property
    def record_type(self) -> str:
        return "A" if self is AddressFamily.IPV4 else "AAAA"

    @property
    def label(self) -> str:
        return "IPv4" if self is AddressFamily.IPV4 else "IPv6"

    @property
    def pattern(self) -> re.Pattern[str]:
        return IPV4_PATTERN if self is AddressFamily.IPV4 else IPV6_PATTERN


class DNSRecord(BaseModel):
    """A record as it currently exists at the provider."""

    model_config = ConfigDict(frozen=True)

    record_id: str
    value: str
    record_type: str
    rr: str = ""


# ============================================================================
# Response schemas
# ============================================================================


class IpEchoResponse(BaseModel):
    """Body returned by the IP-echo endpoint."""

    ip: str = Field(strict=True)


class ProviderRecord(BaseModel):
    """One entry of DescribeSubDomainRecords' record list."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    record_id: str = Field(alias="RecordId", min_length=1)
    value: str = Field(alias="Value")
    record_type: str = Field(default="", alias="Type")
    rr: str = Field(default="", alias="RR")


class ProviderRecordList(BaseModel):
    """The DomainRecords wrapper around the record list."""

    records: list[ProviderRecord] = Field(default_factory=list, alias="Record")


class DescribeSubDomainRecordsResponse(BaseModel):
    """Response of the DescribeSubDomainRecords action."""

    total_count: int | None = Field(default=None, alias="TotalCount")
    domain_records: ProviderRecordList | None = Field(default=None, alias="DomainRecords")
    code: str | None = Field(default=None, alias="Code")
    message: str | None = Field(default=None, alias="Message")


class RecordMutationResponse(BaseModel):
    """Response of AddDomainRecord and UpdateDomainRecord."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    record_id: str | None = Field(default=None, alias="RecordId")
    code: str | None = Field(default=None, alias="Code")
    message: str | None = Field(default=None, alias="Message")


# ============================================================================
# Reconciliation results
# ============================================================================


class ReconcileOutcome(str, Enum):
    """How a reconciliation ended."""

    ADDED = "added"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    FAILED = "failed"


class ReconcileResult(BaseModel):
    """What one reconciliation of one address family ended with."""

    model_config = ConfigDict(frozen=True)

    family: AddressFamily
    fqdn: str
    outcome: ReconcileOutcome
    old_value: str | None = None
    new_value: str | None = None
    error: str | None = None

    def render(self) -> str:
        """Render the result as a single rich console line."""
        fqdn = escape(self.fqdn)
        record_type = self.family.record_type

        if self.outcome is ReconcileOutcome.ADDED:
            return f"[green]✓[/green] (Added) {fqdn} {record_type} {self.new_value}"
        if self.outcome is ReconcileOutcome.UPDATED:
            return (
                f"[green]✓[/green] (Updated) {fqdn} {record_type} "
                f"{escape(self.old_value or '')} -> {self.new_value}"
            )
        if self.outcome is ReconcileOutcome.UNCHANGED:
            return f"[dim]●[/dim] (No change) {fqdn} {record_type} {self.new_value}"
        return f"[red]✗[/red] (Error) {fqdn} {record_type} {escape(self.error or '')}"
