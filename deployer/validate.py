"""
Validation of deployment parameters.

Each VLAN maps to one /24: VLAN 10 is 192.168.10.0/24 (DMZ/production) and
VLAN 20 is 192.168.20.0/24 (internal dev). Host octets below 10 are reserved
for network gear, and 255 is broadcast.
"""

import re

from deployer.exceptions import (
    InvalidOctetError,
    InvalidVlanError,
    IpSubnetMismatchError,
    ValidationError,
)
from deployer.models.request import VLAN_LABELS, DeploymentRequest

MIN_HOST_OCTET = 10
MAX_HOST_OCTET = 254

SUBNET_PATTERNS = {
    "10": re.compile(r"^192\.168\.10\.([0-9]{1,3})$"),
    "20": re.compile(r"^192\.168\.20\.([0-9]{1,3})$"),
}


def validate_vlan(vlan_tag: str) -> None:
    """Raise InvalidVlanError unless the tag is exactly '10' or '20'."""
    if vlan_tag not in VLAN_LABELS:
        raise InvalidVlanError(vlan_tag)


def validate_ip(ip: str, vlan_tag: str) -> None:
    """
    Check that an IP address belongs to the subnet of its VLAN.

    Args:
        ip: Dotted-quad target address
        vlan_tag: VLAN tag the address must live in

    Raises:
        ValidationError: For an unknown VLAN tag
        IpSubnetMismatchError: If the address is not 192.168.<vlan>.<n>
        InvalidOctetError: If the host octet is outside 10-254
    """
    pattern = SUBNET_PATTERNS.get(vlan_tag)
    if pattern is None:
        raise ValidationError(f"unknown VLAN tag: {vlan_tag}")

    match = pattern.fullmatch(ip)
    if match is None:
        raise IpSubnetMismatchError(ip, vlan_tag, VLAN_LABELS[vlan_tag])

    octet = int(match.group(1))
    if octet < MIN_HOST_OCTET or octet > MAX_HOST_OCTET:
        raise InvalidOctetError(octet)


def validate_request(request: DeploymentRequest) -> None:
    """Validate VLAN tag first, then the target IP against it."""
    validate_vlan(request.vlan_tag)
    validate_ip(request.vm_ip, request.vlan_tag)
