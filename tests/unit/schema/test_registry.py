"""Unit tests for the runtime schema registry."""

import pytest

import awto
from awto.schema import get_schema, list_schemas, register_schemas


class UserAccount:
    pass


class Invoice:
    pass


@pytest.mark.unit
class TestRegisterSchemas:
    def test_models_are_keyed_by_module_name(self) -> None:
        register_schemas(UserAccount, Invoice)

        assert list_schemas() == ["invoice", "user_account"]
        assert get_schema("user_account") is UserAccount

    def test_marker_is_exposed_at_package_level(self) -> None:
        result = awto.register_schemas(UserAccount)

        assert result == (UserAccount,)
        assert get_schema("user_account") is UserAccount

    def test_registering_same_model_twice_is_a_noop(self) -> None:
        register_schemas(UserAccount)
        register_schemas(UserAccount)

        assert list_schemas() == ["user_account"]

    def test_colliding_module_names_are_rejected(self) -> None:
        user_account = type("user_account", (), {})
        register_schemas(UserAccount)

        with pytest.raises(ValueError, match="user_account"):
            register_schemas(user_account)

    def test_unknown_schema_raises_key_error(self) -> None:
        with pytest.raises(KeyError) as exc_info:
            get_schema("missing")
        assert "not found" in str(exc_info.value)

    def test_unknown_schema_lists_registered_names(self) -> None:
        register_schemas(UserAccount, Invoice)

        with pytest.raises(KeyError) as exc_info:
            get_schema("payment")
        assert "['invoice', 'user_account']" in str(exc_info.value)
