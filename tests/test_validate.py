"""
Tests for VLAN and IP validation.
"""

import pytest

from deployer.exceptions import (
    InvalidOctetError,
    InvalidVlanError,
    IpSubnetMismatchError,
    ValidationError,
)
from deployer.models.request import DeploymentRequest
from deployer.validate import validate_ip, validate_request, validate_vlan


class TestValidateVlan:
    """Tests for VLAN tag validation."""

    @pytest.mark.parametrize("vlan_tag", ["10", "20"])
    def test_supported_tags_pass(self, vlan_tag):
        validate_vlan(vlan_tag)

    @pytest.mark.parametrize("vlan_tag", ["", "30", "1", "010", " 20", "20 ", "ten", "-10"])
    def test_other_tags_fail(self, vlan_tag):
        with pytest.raises(InvalidVlanError):
            validate_vlan(vlan_tag)

    def test_error_names_both_segments(self):
        """Test that the message tells the operator what each VLAN is for."""
        with pytest.raises(InvalidVlanError) as exc_info:
            validate_vlan("30")

        message = str(exc_info.value)
        assert "'30'" in message
        assert "DMZ/production" in message
        assert "internal dev" in message


class TestValidateIp:
    """Tests for IP validation against the VLAN subnet."""

    def test_dev_vlan_address_passes(self):
        validate_ip("192.168.20.50", "20")

    def test_dmz_vlan_address_passes(self):
        validate_ip("192.168.10.100", "10")

    @pytest.mark.parametrize("ip", ["192.168.20.10", "192.168.20.254"])
    def test_octet_bounds_are_inclusive(self, ip):
        validate_ip(ip, "20")

    def test_wrong_subnet_fails(self):
        """Test that a DMZ address is rejected on the dev VLAN."""
        with pytest.raises(IpSubnetMismatchError) as exc_info:
            validate_ip("192.168.10.50", "20")

        message = str(exc_info.value)
        assert "192.168.20.x" in message
        assert "internal dev" in message

    def test_wrong_subnet_on_dmz_vlan_names_label(self):
        with pytest.raises(IpSubnetMismatchError) as exc_info:
            validate_ip("192.168.20.50", "10")

        assert "DMZ/production" in str(exc_info.value)

    def test_octet_below_range_fails(self):
        with pytest.raises(InvalidOctetError) as exc_info:
            validate_ip("192.168.20.5", "20")

        assert exc_info.value.octet == 5
        assert "between 10 and 254" in str(exc_info.value)

    def test_octet_above_range_fails(self):
        with pytest.raises(InvalidOctetError) as exc_info:
            validate_ip("192.168.20.255", "20")

        assert exc_info.value.octet == 255

    def test_four_digit_octet_does_not_match(self):
        with pytest.raises(IpSubnetMismatchError):
            validate_ip("192.168.20.1000", "20")

    @pytest.mark.parametrize(
        "ip",
        ["", "192.168.20", "192.168.20.", "10.0.20.50", "192.168.20.50\n", "192.168.20.5a"],
    )
    def test_malformed_addresses_fail(self, ip):
        with pytest.raises(IpSubnetMismatchError):
            validate_ip(ip, "20")

    def test_unknown_vlan_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_ip("192.168.30.50", "30")

        assert "unknown VLAN tag" in str(exc_info.value)


class TestValidateRequest:
    """Tests for whole-request validation."""

    def test_valid_request_passes(self):
        validate_request(DeploymentRequest(app_name="shop", vm_ip="192.168.20.50"))

    def test_vlan_checked_before_ip(self):
        request = DeploymentRequest(app_name="shop", vlan_tag="99", vm_ip="not-an-ip")

        with pytest.raises(InvalidVlanError):
            validate_request(request)

    def test_missing_ip_fails(self):
        with pytest.raises(IpSubnetMismatchError):
            validate_request(DeploymentRequest(app_name="shop"))
