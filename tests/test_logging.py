"""
Tests for log value rendering
"""

from storefront.logging import get_logger, loggable


def test_item_key_shortened_to_prefix():
    assert loggable("c4ca4238a0b923820dcc509a6f75849b") == "c4ca4238"


def test_non_hash_keys_kept_whole():
    assert loggable("not-in-cart") == "not-in-cart"
    assert loggable("C4CA4238A0B923820DCC509A6F75849B") == "C4CA4238A0B923820DCC509A6F75849B"


def test_product_id():
    assert loggable(42) == "42"


def test_missing_values():
    assert loggable(None) == "-"
    assert loggable("") == "-"


def test_control_characters_escaped():
    """Test a slug cannot start a forged log line."""
    assert loggable("tee\nINFO storefront: fake") == "tee\\nINFO storefront: fake"
    assert loggable("a\r\tb\x00") == "a\\r\\tb"


def test_long_text_truncated():
    rendered = loggable("x" * 60)

    assert rendered == "x" * 50 + "..."
    assert loggable("x" * 60, max_length=10) == "x" * 10 + "..."


def test_get_logger_is_cached():
    assert get_logger("storefront.test") is get_logger("storefront.test")
