"""Tests for the secure and naive real-IP selectors."""

import pytest

from srealip.selector import (
    extract_ip_from_remote_addr,
    naive_real_ip,
    secure_real_ip,
    split_host_port,
)

PUBLIC_1 = "144.12.54.87"
PUBLIC_2 = "119.14.55.11"
PUBLIC_3 = "119.15.55.11"
LOCAL = "127.0.0.0"
PRIVATE = "192.168.1.1"
INVALID = "invalidStr"
PUBLIC_1_WITH_PORT = f"{PUBLIC_1}:80"


# =========================================================================
# Peer address handling
# =========================================================================


class TestSplitHostPort:
    @pytest.mark.parametrize(
        "hostport, expected",
        [
            ("144.12.54.87:8080", ("144.12.54.87", "8080")),
            ("[::1]:443", ("::1", "443")),
            ("example.com:80", ("example.com", "80")),
            ("host:", ("host", "")),
            (":80", ("", "80")),
        ],
    )
    def test_valid(self, hostport, expected):
        assert split_host_port(hostport) == expected

    @pytest.mark.parametrize(
        "hostport, message",
        [
            ("144.12.54.87", "missing port"),
            ("not:a:valid:hostport", "too many colons"),
            ("::1", "too many colons"),
            ("[::1", "missing ']'"),
            ("[::1]", "missing port"),
            ("[::1]x:80", "missing port"),
            ("[::1]:80:90", "too many colons"),
            ("[a[b]:80", "unexpected bracket"),
            ("a]b:80", "unexpected bracket"),
        ],
    )
    def test_invalid(self, hostport, message):
        with pytest.raises(ValueError, match=message):
            split_host_port(hostport)


class TestExtractIPFromRemoteAddr:
    def test_strips_port(self):
        assert extract_ip_from_remote_addr("144.12.54.87:8080") == "144.12.54.87"

    def test_bare_host_unchanged(self):
        assert extract_ip_from_remote_addr("144.12.54.87") == "144.12.54.87"

    def test_bracketed_ipv6(self):
        assert extract_ip_from_remote_addr("[2001:db8::1]:443") == "2001:db8::1"

    def test_trims_whitespace(self):
        assert extract_ip_from_remote_addr("  10.0.0.1:80 ") == "10.0.0.1"

    def test_malformed_returned_verbatim(self):
        assert extract_ip_from_remote_addr("not:a:valid:hostport") == (
            "not:a:valid:hostport"
        )

    def test_empty(self):
        assert extract_ip_from_remote_addr("") == ""


# =========================================================================
# secure_real_ip
# =========================================================================


class TestSecureRealIP:
    @pytest.mark.parametrize(
        "forwarded_for, remote_addr, expected",
        [
            pytest.param([], PUBLIC_1, PUBLIC_1, id="no-forwarded-for"),
            pytest.param([PUBLIC_2], PUBLIC_1, PUBLIC_2, id="one-value"),
            pytest.param(
                [LOCAL, PUBLIC_1, PUBLIC_2], PUBLIC_3, PUBLIC_2, id="rightmost-wins"
            ),
            pytest.param([PUBLIC_1, LOCAL], PUBLIC_3, PUBLIC_1, id="skips-local"),
            pytest.param(
                [PUBLIC_1, LOCAL, PRIVATE], PUBLIC_3, PUBLIC_1, id="skips-private"
            ),
            pytest.param([INVALID], PUBLIC_3, PUBLIC_3, id="only-invalid"),
            pytest.param(
                [PUBLIC_2, PRIVATE, INVALID], PUBLIC_3, PUBLIC_2, id="invalid-then-ip"
            ),
            pytest.param(
                [PUBLIC_1, LOCAL, INVALID], PUBLIC_3, PUBLIC_1, id="invalid-local-ip"
            ),
            pytest.param(
                [LOCAL, INVALID], PUBLIC_1_WITH_PORT, PUBLIC_1, id="remote-with-port"
            ),
            pytest.param([INVALID], INVALID, INVALID, id="invalid-everywhere"),
            pytest.param([], "", "", id="all-empty"),
        ],
    )
    def test_table(self, forwarded_for, remote_addr, expected):
        assert secure_real_ip(forwarded_for, remote_addr) == expected

    def test_all_private_falls_back_to_remote_host(self):
        assert secure_real_ip(["10.0.0.1", "192.168.0.7"], "144.12.54.87:80") == (
            "144.12.54.87"
        )

    def test_fallback_is_not_filtered(self):
        assert secure_real_ip([PRIVATE], "10.0.0.1:443") == "10.0.0.1"

    def test_skips_unparseable(self):
        assert secure_real_ip(["not-an-ip", PUBLIC_1], "X") == PUBLIC_1

    def test_entries_trimmed_and_canonicalised(self):
        assert secure_real_ip(["  2001:DB8::1 ", " "], "X") == "2001:db8::1"

    def test_ipv4_mapped_returned_as_ipv4(self):
        assert secure_real_ip(["::ffff:144.12.54.87"], "X") == PUBLIC_1

    def test_shared_address_space_skipped(self):
        assert secure_real_ip([PUBLIC_1, "100.64.3.3"], "X") == PUBLIC_1

    def test_deterministic_and_does_not_mutate(self):
        forwarded_for = [PRIVATE, PUBLIC_1, "", PUBLIC_2, INVALID]
        snapshot = list(forwarded_for)
        first = secure_real_ip(forwarded_for, "X")
        second = secure_real_ip(forwarded_for, "X")
        assert first == second == PUBLIC_2
        assert forwarded_for == snapshot

    def test_accepts_tuple(self):
        assert secure_real_ip((PUBLIC_1, PUBLIC_2), "") == PUBLIC_2


# =========================================================================
# naive_real_ip
# =========================================================================


class TestNaiveRealIP:
    @pytest.mark.parametrize(
        "real_ip, forwarded_for, remote_addr, expected",
        [
            pytest.param("", [], PUBLIC_1, PUBLIC_1, id="no-forwarded-for"),
            pytest.param("", [PUBLIC_2], PUBLIC_1, PUBLIC_2, id="one-value"),
            pytest.param(
                "", [LOCAL, PUBLIC_1, PUBLIC_2], PUBLIC_3, PUBLIC_1, id="leftmost-wins"
            ),
            pytest.param(
                "", [PRIVATE, PUBLIC_1, LOCAL], PUBLIC_3, PUBLIC_1, id="skips-private"
            ),
            pytest.param("", [INVALID], PUBLIC_3, PUBLIC_3, id="only-invalid"),
            pytest.param(
                "", [PRIVATE, PUBLIC_2, INVALID], PUBLIC_3, PUBLIC_2, id="mixed"
            ),
            pytest.param(
                "", [LOCAL, INVALID, PUBLIC_1], PUBLIC_3, PUBLIC_1, id="invalid-then-ip"
            ),
            pytest.param(
                PUBLIC_2, [PUBLIC_1, LOCAL], PUBLIC_3, PUBLIC_2, id="real-ip-first"
            ),
            pytest.param(
                PRIVATE, [LOCAL, PUBLIC_1], PUBLIC_3, PUBLIC_1, id="private-real-ip"
            ),
            pytest.param(
                PRIVATE, [LOCAL, PRIVATE], PUBLIC_3, PUBLIC_3, id="private-headers"
            ),
            pytest.param(
                INVALID, [PUBLIC_1], PUBLIC_3, PUBLIC_1, id="invalid-real-ip"
            ),
            pytest.param(
                INVALID, [INVALID], PUBLIC_3, PUBLIC_3, id="invalid-headers"
            ),
            pytest.param(
                "", [LOCAL, INVALID], PUBLIC_1_WITH_PORT, PUBLIC_1, id="remote-with-port"
            ),
            pytest.param("", [], "", "", id="all-empty"),
            pytest.param(INVALID, [INVALID], INVALID, INVALID, id="invalid-everywhere"),
        ],
    )
    def test_table(self, real_ip, forwarded_for, remote_addr, expected):
        assert naive_real_ip(real_ip, forwarded_for, remote_addr) == expected

    def test_real_ip_trimmed(self):
        assert naive_real_ip(f"  {PUBLIC_2} ", [PUBLIC_1], "X") == PUBLIC_2

    def test_malformed_remote_addr_returned_verbatim(self):
        assert naive_real_ip("", [], "not:a:valid:hostport") == "not:a:valid:hostport"

    def test_deterministic_and_does_not_mutate(self):
        forwarded_for = [PUBLIC_1, PRIVATE, PUBLIC_2]
        snapshot = list(forwarded_for)
        assert naive_real_ip("", forwarded_for, "X") == PUBLIC_1
        assert naive_real_ip("", forwarded_for, "X") == PUBLIC_1
        assert forwarded_for == snapshot
