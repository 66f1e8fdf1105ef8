"""
Tests for session identifier resolution.
"""

import re

from course_ta.core.session import mint_session_id, resolve_session_id

ISO_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestMintSessionId:
    def test_is_iso_timestamp(self):
        assert ISO_PATTERN.match(mint_session_id())


class TestResolveSessionId:
    def test_supplied_value_wins(self):
        assert resolve_session_id("body-session", "cookie-session") == "body-session"

    def test_cookie_used_when_nothing_supplied(self):
        assert resolve_session_id(None, "cookie-session") == "cookie-session"

    def test_blank_supplied_value_falls_through(self):
        assert resolve_session_id("   ", "cookie-session") == "cookie-session"

    def test_minted_when_nothing_available(self):
        assert ISO_PATTERN.match(resolve_session_id(None, None))

    def test_no_mint_returns_none(self):
        assert resolve_session_id(None, "", mint=False) is None

    def test_value_is_stripped(self):
        assert resolve_session_id("  s1 ", None) == "s1"
