"""Tests for the EmailAddress value object."""

import pytest
from protean.exceptions import ValidationError
from storefront.shared.email import EmailAddress


class TestEmailAddress:
    @pytest.mark.parametrize(
        "address",
        [
            "john.doe@example.com",
            "a@b.co",
            "first+tag@sub.example.org",
        ],
    )
    def test_accepts_well_formed_addresses(self, address):
        assert EmailAddress(address=address).address == address

    @pytest.mark.parametrize(
        "address",
        [
            "plainaddress",
            "@example.com",
            "john@",
            "john@@example.com",
            "john doe@example.com",
            "john@example",
            "john..doe@example.com",
            ".john@example.com",
            "john@-example.com",
            "john@example.com.",
            "john<x>@example.com",
        ],
    )
    def test_rejects_malformed_addresses(self, address):
        with pytest.raises(ValidationError) as exc:
            EmailAddress(address=address)
        assert "email" in exc.value.messages

    def test_normalized_lowercases_and_strips(self):
        assert EmailAddress.normalized("  John.Doe@Example.COM ") == "john.doe@example.com"
