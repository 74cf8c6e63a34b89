"""Public address discovery."""

import httpx
from pydantic import ValidationError

from aliddns.config import EndpointsConfig
from aliddns.errors import ResolutionError
from aliddns.models import AddressFamily, IpEchoResponse

# Binding the local side to the wildcard address of a family forces the
# outgoing connection onto that family.
LOCAL_ADDRESSES = {
    AddressFamily.IPV4: "0.0.0.0",
    AddressFamily.IPV6: "::",
}


def is_valid_address(family: AddressFamily, value: str) -> bool:
    """Check that a string is exactly one address of the given family."""
    return family.pattern.fullmatch(value) is not None


def resolve_address(
    family: AddressFamily,
    endpoints: EndpointsConfig | None = None,
    timeout: float = 10.0,
) -> str:
    """Get the public address of this machine for one address family.

    Args:
        family: Address family to resolve
        endpoints: Endpoint configuration holding the IP-echo URLs
        timeout: Request timeout in seconds

    Returns:
        The validated address literal

    Raises:
        ResolutionError: The request failed or the answer was not a valid address
    """
    endpoints = endpoints or EndpointsConfig()
    url = endpoints.ip_echo_url(family)
    transport = httpx.HTTPTransport(local_address=LOCAL_ADDRESSES[family])

    try:
        with httpx.Client(transport=transport, timeout=timeout) as client:
            response = client.get(url)
            response.raise_for_status()
    except httpx.HTTPError as e:
        raise ResolutionError(f"Get {family.label} address failed: {e}") from e

    try:
        data = IpEchoResponse.model_validate_json(response.text)
    except ValidationError as e:
        raise ResolutionError(
            f"Get {family.label} address failed. Can't parse server response."
        ) from e

    if not is_valid_address(family, data.ip):
        raise ResolutionError(
            f"Get {family.label} address failed. Invalid address: {data.ip!r}"
        )

    return data.ip
