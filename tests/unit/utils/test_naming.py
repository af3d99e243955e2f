"""Unit tests for identifier case conversion."""

import pytest

from awto.utils.naming import split_words, to_snake_case


@pytest.mark.unit
class TestToSnakeCase:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("UserAccount", "user_account"),
            ("Invoice", "invoice"),
            ("userAccount", "user_account"),
            ("HTTPServer", "http_server"),
            ("XMLHttpRequest", "xml_http_request"),
            ("ABC", "abc"),
            ("Model2Account", "model2_account"),
            ("user_account", "user_account"),
            ("User__Account", "user_account"),
            ("_PrivateModel", "private_model"),
            ("Über", "über"),
            ("ÜberKonto", "über_konto"),
        ],
    )
    def test_converts_identifier(self, name: str, expected: str) -> None:
        assert to_snake_case(name) == expected

    def test_conversion_is_idempotent(self) -> None:
        once = to_snake_case("UserAccountHistory")
        assert to_snake_case(once) == once

    def test_conversion_is_repeatable(self) -> None:
        results = {to_snake_case("UserAccount") for _ in range(5)}
        assert results == {"user_account"}

    def test_different_casings_can_collide(self) -> None:
        assert to_snake_case("UserAccount") == to_snake_case("user_account")


@pytest.mark.unit
def test_split_words_preserves_casing() -> None:
    assert split_words("XMLHttpRequest") == ["XML", "Http", "Request"]
