"""Unit tests for the Schema entity."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from dp_kernel.kernel.errors import InvalidPermissionValueError, InvariantViolationError
from dp_kernel.kernel.security import NOT_LOADED, entity_band, table_data_band
from dp_kernel.management import DriverEntity, Schema, SchemaProperty, User


def _schema() -> Schema:
    return Schema(
        "s-1",
        "Warehouse",
        "jdbc:postgresql://db/warehouse",
        "etl",
        "s3cr3t",
        create_user=User("u-1", "admin"),
        create_time=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        driver_entity=DriverEntity("pg-42", "PostgreSQL 42"),
        properties=[SchemaProperty("ssl", "true")],
    )


# ---------------------------------------------------------------------------
# Permission
# ---------------------------------------------------------------------------


class TestSchemaPermission:
    def test_fresh_schema_is_not_loaded(self) -> None:
        schema = Schema()
        assert schema.permission == NOT_LOADED
        assert not schema.is_loaded()
        assert not (schema.can_read() or schema.can_edit() or schema.can_delete())

    @pytest.mark.parametrize(
        ("value", "read", "edit", "delete"),
        [
            (0, False, False, False),
            (63, False, False, False),
            (64, True, False, False),
            (67, True, False, False),
            (68, True, True, False),
            (72, True, True, True),
            (255, True, True, True),
        ],
    )
    def test_table_data_capabilities(self, value: int, read: bool, edit: bool, delete: bool) -> None:
        schema = Schema()
        schema.set_permission(value)
        assert (schema.can_read(), schema.can_edit(), schema.can_delete()) == (read, edit, delete)

    def test_out_of_space_rejected(self) -> None:
        schema = Schema()
        with pytest.raises(InvalidPermissionValueError):
            schema.set_permission(512)
        assert schema.permission == NOT_LOADED

    def test_custom_band(self) -> None:
        schema = Schema(band=table_data_band(100))
        schema.set_permission(104)
        assert schema.can_edit()
        assert not schema.can_delete()

    def test_foreign_band_rejected(self) -> None:
        with pytest.raises(InvariantViolationError):
            Schema(band=entity_band())

    def test_static_predicates(self) -> None:
        assert Schema.is_read_table_data_permission(65)
        assert not Schema.is_read_table_data_permission(68)
        assert Schema.is_edit_table_data_permission(70)
        assert Schema.is_delete_table_data_permission(200)
        assert not Schema.can_read_table_data(63)
        assert Schema.can_edit_table_data(72)
        assert not Schema.can_delete_table_data(71)


# ---------------------------------------------------------------------------
# Clone / clear_sensitive
# ---------------------------------------------------------------------------


class TestSchemaClone:
    def test_clone_copies_permission_and_payload(self) -> None:
        schema = _schema()
        schema.set_permission(68)
        clone = schema.clone()
        assert clone is not schema
        assert clone == schema
        assert clone.permission == 68
        assert clone.to_dict(include_sensitive=True) == schema.to_dict(include_sensitive=True)

    def test_clone_does_not_reset_permission(self) -> None:
        schema = _schema()
        schema.set_permission(72)
        assert schema.clone().can_delete()

    def test_clone_has_own_properties_list(self) -> None:
        schema = _schema()
        clone = schema.clone()
        clone.properties.append(SchemaProperty("timeout", "5"))  # type: ignore[union-attr]
        assert schema.properties == [SchemaProperty("ssl", "true")]

    def test_clone_permission_is_independent(self) -> None:
        schema = _schema()
        schema.set_permission(68)
        clone = schema.clone()
        clone.reset_permission()
        assert schema.permission == 68

    def test_clear_sensitive_only_drops_password(self) -> None:
        schema = _schema()
        schema.set_permission(68)
        before = schema.to_dict(include_sensitive=True)
        schema.clear_sensitive()
        after = schema.to_dict(include_sensitive=True)
        assert after.pop("password") is None
        assert before.pop("password") == "s3cr3t"
        assert after == before
        assert schema.permission == 68

    def test_clear_password_alias(self) -> None:
        schema = _schema()
        schema.clear_password()
        assert schema.password is None

    def test_clear_on_clone_keeps_original_secret(self) -> None:
        schema = _schema()
        clone = schema.clone()
        clone.clear_sensitive()
        assert schema.password == "s3cr3t"


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------


class TestSchemaPayload:
    def test_has_helpers(self) -> None:
        schema = _schema()
        assert schema.has_create_user()
        assert schema.has_create_time()
        assert schema.has_property()
        assert schema.has_driver_entity()

    def test_has_helpers_on_empty(self) -> None:
        schema = Schema(properties=[], driver_entity=DriverEntity(""))
        assert not schema.has_create_user()
        assert not schema.has_create_time()
        assert not schema.has_property()
        assert not schema.has_driver_entity()

    def test_properties_json(self) -> None:
        schema = _schema()
        assert schema.properties_json == '[{"name": "ssl", "value": "true"}]'
        schema.properties_json = '[{"name": "timeout", "value": "30"}]'
        assert schema.properties == [SchemaProperty("timeout", "30")]

    def test_properties_json_empty(self) -> None:
        schema = Schema()
        assert schema.properties_json == "[]"
        schema.properties_json = ""
        assert schema.properties == []

    def test_to_dict_hides_password_by_default(self) -> None:
        data = _schema().to_dict()
        assert "password" not in data
        assert data["title"] == "Warehouse"
        assert data["createTime"] == "2024-01-02T03:04:05+00:00"
        assert data["dataPermission"] == NOT_LOADED

    def test_repr_hides_password(self) -> None:
        r = repr(_schema())
        assert "Warehouse" in r
        assert "s3cr3t" not in r
