"""Unit tests for the ORM runtime used by generated packages."""

import sys

import pytest
import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from awto import orm
from awto.schema import register_schemas


class OrmUserAccount(orm.Base):
    __tablename__ = "orm_test_user_account"

    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str] = mapped_column(sa.String(255))


class PlainSchema:
    pass


@pytest.fixture
def cleanup_modules():
    names = []
    yield names
    for name in names:
        sys.modules.pop(name, None)


@pytest.mark.unit
class TestIncludeModel:
    def test_binds_mapped_model(self, cleanup_modules) -> None:
        register_schemas(OrmUserAccount)
        cleanup_modules.append("database.orm_user_account")

        module = orm.include_model("database", "orm_user_account")

        assert module.__name__ == "database.orm_user_account"
        assert module.Model is OrmUserAccount
        assert module.table is OrmUserAccount.__table__
        assert sys.modules["database.orm_user_account"] is module

    def test_select_builds_statement(self, cleanup_modules) -> None:
        register_schemas(OrmUserAccount)
        cleanup_modules.append("database.orm_user_account")
        module = orm.include_model("database", "orm_user_account")

        statement = module.select(OrmUserAccount.email == "a@example.com")

        sql = str(statement)
        assert "FROM orm_test_user_account" in sql
        assert "WHERE orm_test_user_account.email" in sql

    def test_unmapped_model_has_no_table(self, cleanup_modules) -> None:
        register_schemas(PlainSchema)
        cleanup_modules.append("database.plain_schema")

        module = orm.include_model("database", "plain_schema")

        assert module.Model is PlainSchema
        assert module.table is None

    def test_unknown_model_raises(self) -> None:
        with pytest.raises(KeyError, match="not found in registry"):
            orm.include_model("database", "missing_model")

    def test_models_share_metadata(self) -> None:
        assert "orm_test_user_account" in orm.metadata.tables
