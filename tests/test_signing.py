"""Tests for request signing."""

from unittest.mock import patch
from urllib.parse import unquote

import pytest

from aliddns.signing import (
    attach_common_params,
    canonicalize,
    percent_encode,
    sign,
    string_to_sign,
)

PARAMS = {
    "AccessKeyId": "testid",
    "Action": "DescribeSubDomainRecords",
    "Format": "JSON",
    "SignatureMethod": "HMAC-SHA1",
    "SignatureNonce": "abc123",
    "SignatureVersion": "1.0",
    "SubDomain": "ddns.example.com",
    "Timestamp": "2024-01-01T00:00:00Z",
    "Type": "A",
    "Version": "2015-01-09",
}


class TestPercentEncode:
    """Tests for percent_encode()."""

    def test_unreserved_characters_untouched(self):
        """Test letters, digits and -_.~ stay literal."""
        assert percent_encode("AZaz09-_.~") == "AZaz09-_.~"

    def test_escapes_sub_delimiters(self):
        """Test !'()* are escaped as uppercase hex."""
        assert percent_encode("!'()*") == "%21%27%28%29%2A"

    def test_escapes_reserved_characters(self):
        """Test reserved characters are escaped."""
        assert percent_encode("a b/c:d=e&f+g") == "a%20b%2Fc%3Ad%3De%26f%2Bg"

    def test_encodes_utf8(self):
        """Test non-ASCII text is encoded as UTF-8 bytes."""
        assert percent_encode("é") == "%C3%A9"

    @pytest.mark.parametrize("value", ["it's (a) *test*!", "2001:db8::1", "x+y/z=="])
    def test_decode_gives_back_input(self, value):
        """Test decoding the encoded value reproduces the original."""
        assert unquote(percent_encode(value)) == value


class TestCanonicalize:
    """Tests for canonicalize() and string_to_sign()."""

    def test_sorted_by_key(self):
        """Test pairs are sorted by raw key."""
        assert canonicalize({"b": "2", "a": "1", "B": "3"}) == "B=3&a=1&b=2"

    def test_string_to_sign(self):
        """Test the full string to sign for a lookup call."""
        assert string_to_sign(PARAMS) == (
            "GET&%2F&AccessKeyId%3Dtestid%26Action%3DDescribeSubDomainRecords"
            "%26Format%3DJSON%26SignatureMethod%3DHMAC-SHA1%26SignatureNonce%3Dabc123"
            "%26SignatureVersion%3D1.0%26SubDomain%3Dddns.example.com"
            "%26Timestamp%3D2024-01-01T00%253A00%253A00Z%26Type%3DA%26Version%3D2015-01-09"
        )


class TestSign:
    """Tests for sign()."""

    def test_known_signature(self):
        """Test signature matches a precomputed HMAC-SHA1 digest."""
        assert sign("testsecret", PARAMS) == "xYaIQtuVsfCMjLHVAgfMj5f2fpg="

    def test_deterministic(self):
        """Test identical inputs give identical signatures."""
        assert sign("testsecret", dict(PARAMS)) == sign("testsecret", dict(reversed(PARAMS.items())))

    def test_secret_changes_signature(self):
        """Test a different secret gives a different signature."""
        assert sign("othersecret", PARAMS) == "dSQ9N/IpLGopDqRcdAMUV9M+l5A="

    def test_value_change_changes_signature(self):
        """Test changing a value changes the signature."""
        changed = {**PARAMS, "Type": "AAAA"}
        assert sign("testsecret", changed) != sign("testsecret", PARAMS)

    def test_key_change_changes_signature(self):
        """Test moving a value to another key changes the signature."""
        a = {"ab": "c", "x": "1"}
        b = {"a": "bc", "x": "1"}
        assert sign("testsecret", a) != sign("testsecret", b)


class TestAttachCommonParams:
    """Tests for attach_common_params()."""

    def test_adds_common_fields(self):
        """Test common fields are merged with action parameters."""
        params = attach_common_params({"Action": "DescribeSubDomainRecords"}, "testid", "testsecret")

        assert params["Format"] == "JSON"
        assert params["Version"] == "2015-01-09"
        assert params["AccessKeyId"] == "testid"
        assert params["SignatureMethod"] == "HMAC-SHA1"
        assert params["SignatureVersion"] == "1.0"
        assert params["Action"] == "DescribeSubDomainRecords"
        assert len(params["SignatureNonce"]) == 32
        assert params["Timestamp"].endswith("Z")

    def test_signature_is_last_and_valid(self):
        """Test Signature is appended last and signs everything else."""
        params = attach_common_params({"Action": "AddDomainRecord"}, "testid", "testsecret")

        assert list(params)[-1] == "Signature"
        unsigned = {k: v for k, v in params.items() if k != "Signature"}
        assert params["Signature"] == sign("testsecret", unsigned)

    def test_fixed_nonce_and_timestamp(self):
        """Test overrides reproduce a known signature."""
        action = {
            "Action": "DescribeSubDomainRecords",
            "SubDomain": "ddns.example.com",
            "Type": "A",
        }
        params = attach_common_params(
            action, "testid", "testsecret",
            nonce="abc123", timestamp="2024-01-01T00:00:00Z",
        )

        assert params["Signature"] == "xYaIQtuVsfCMjLHVAgfMj5f2fpg="

    def test_fresh_nonce_per_call(self):
        """Test every call generates a new nonce."""
        first = attach_common_params({"Action": "X"}, "testid", "testsecret")
        second = attach_common_params({"Action": "X"}, "testid", "testsecret")

        assert first["SignatureNonce"] != second["SignatureNonce"]
        assert first["Signature"] != second["Signature"]

    def test_timestamp_format(self):
        """Test timestamp is the current UTC time in ISO-8601."""
        with patch("aliddns.signing.make_timestamp", return_value="2024-05-06T07:08:09Z"):
            params = attach_common_params({"Action": "X"}, "testid", "testsecret")

        assert params["Timestamp"] == "2024-05-06T07:08:09Z"

    def test_does_not_mutate_input(self):
        """Test the action mapping is left untouched."""
        action = {"Action": "X"}
        attach_common_params(action, "testid", "testsecret")

        assert action == {"Action": "X"}
