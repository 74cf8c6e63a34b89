"""AliDNS (Alibaba Cloud DNS) provider implementation."""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from aliddns.errors import ProviderError, RecordLookupError, TransportError, UpdateError
from aliddns.models import (
    DescribeSubDomainRecordsResponse,
    DNSRecord,
    RecordMutationResponse,
)
from aliddns.providers.dns.base import DNSProvider
from aliddns.signing import attach_common_params

M = TypeVar("M", bound=BaseModel)


class AliDNSProvider(DNSProvider):
    """DNS provider implementation for AliDNS."""

    BASE_URL = "https://alidns.aliyuncs.com/"

    def __init__(
        self,
        access_key_id: str,
        access_key_secret: str,
        endpoint: str | None = None,
        timeout: float = 10.0,
    ):
        """Initialize AliDNS provider.

        Args:
            access_key_id: AccessKey ID
            access_key_secret: AccessKey secret
            endpoint: API endpoint (defaults to the public AliDNS endpoint)
            timeout: Request timeout in seconds
        """
        self.access_key_id = access_key_id
        self.access_key_secret = access_key_secret
        self.client = httpx.Client(
            base_url=endpoint or self.BASE_URL,
            headers={"Accept": "application/json"},
            timeout=timeout,
        )

    def close(self) -> None:
        self.client.close()

    def _call(self, action_params: dict[str, str]) -> httpx.Response:
        """Sign and send one API call."""
        params = attach_common_params(
            action_params, self.access_key_id, self.access_key_secret
        )
        try:
            # Errors come back as JSON bodies with a 4xx status
            return self.client.get("", params=params)
        except httpx.RequestError as e:
            raise TransportError(
                f"HTTP request error: {e}", code=type(e).__name__
            ) from e

    @staticmethod
    def _parse(
        response: httpx.Response,
        schema: type[M],
        error_cls: type[ProviderError],
        operation: str,
    ) -> M:
        try:
            data: Any = response.json()
        except ValueError as e:
            raise error_cls(f"{operation} failed. Can't parse server response.") from e

        try:
            return schema.model_validate(data)
        except ValidationError as e:
            code = data.get("Code") if isinstance(data, dict) else None
            raise error_cls(
                f"{operation} failed. Unexpected server response.", code=code
            ) from e

    def lookup_record(self, domain: str, rr: str, record_type: str) -> DNSRecord | None:
        """Look up the record of one subdomain and type."""
        sub_domain = domain if rr == "@" else f"{rr}.{domain}"
        response = self._call({
            "Action": "DescribeSubDomainRecords",
            "SubDomain": sub_domain,
            "Type": record_type,
        })
        data = self._parse(
            response, DescribeSubDomainRecordsResponse, RecordLookupError, "Query record"
        )

        if data.total_count == 0:
            return None

        records = data.domain_records.records if data.domain_records else []
        if data.total_count == 1 and records:
            record = records[0]
            return DNSRecord(
                record_id=record.record_id,
                value=record.value,
                record_type=record.record_type or record_type,
                rr=record.rr or rr,
            )

        if data.total_count is not None and data.total_count > 1:
            raise RecordLookupError(
                f"Query record failed. {data.total_count} records match {sub_domain} {record_type}.",
                code=data.code,
            )
        raise RecordLookupError(_describe_failure("Query record", data), code=data.code)

    def upsert_record(
        self,
        domain: str,
        rr: str,
        value: str,
        record_type: str,
        record_id: str | None = None,
    ) -> DNSRecord:
        """Create a record, or update it when its ID is known."""
        if record_id:
            action_params = {
                "Action": "UpdateDomainRecord",
                "RecordId": record_id,
                "RR": rr,
                "Type": record_type,
                "Value": value,
            }
        else:
            action_params = {
                "Action": "AddDomainRecord",
                "DomainName": domain,
                "RR": rr,
                "Type": record_type,
                "Value": value,
            }

        response = self._call(action_params)
        data = self._parse(response, RecordMutationResponse, UpdateError, "Update record")

        if not data.record_id:
            raise UpdateError(_describe_failure("Update record", data), code=data.code)

        return DNSRecord(
            record_id=data.record_id,
            value=value,
            record_type=record_type,
            rr=rr,
        )


def _describe_failure(
    operation: str,
    data: DescribeSubDomainRecordsResponse | RecordMutationResponse,
) -> str:
    if data.message:
        return f"{operation} failed. {data.message}"
    return f"{operation} failed."
