"""Tests for the error registry, exception classes, settings and interface registry."""

import pytest

from campus_types.users import User
from campus_backend.exceptions import (
    CacheException,
    CampusException,
    ConfigurationException,
    DatabaseException,
    NotFoundException,
    ValidationException,
    get_error_definition,
    load_error_registry,
)
from campus_backend.interfaces import (
    ENTITY_INTERFACES,
    BackendEntityInterface,
    InterfaceRegistry,
    Relation,
    UserInterface,
    build_registry,
    default_registry,
)
from campus_backend.settings import require_env, settings

pytestmark = pytest.mark.unit


class TestErrorRegistry:

    def test_all_codes_registered(self):
        registry = load_error_registry()

        assert set(registry) == {
            "DB_001", "DB_002", "DB_003", "DB_004", "DB_005",
            "NF_001", "NF_002", "CACHE_001", "VAL_001", "CONFIG_001",
        }

    @pytest.mark.parametrize("exception_class,status", [
        (ValidationException, 400),
        (NotFoundException, 404),
        (DatabaseException, 500),
        (CacheException, 500),
        (ConfigurationException, 500),
    ])
    def test_default_code_matches_status(self, exception_class, status):
        error = exception_class()

        assert error.status_code == status
        assert get_error_definition(error.error_code).http_status == status

    def test_duplicate_code_in_file(self, tmp_path):
        entry = (
            "  - code: X_001\n    http_status: 500\n    category: internal\n"
            "    severity: error\n    title: X\n    message: X\n"
        )
        registry_file = tmp_path / "registry.yaml"
        registry_file.write_text("errors:\n" + entry + entry, encoding="utf-8")

        with pytest.raises(ValueError):
            load_error_registry(registry_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_error_registry(tmp_path / "absent.yaml")

    def test_unknown_code(self):
        definition = get_error_definition("NOPE_001")

        assert definition.code == "UNKNOWN"
        assert definition.http_status == 500


class TestCampusException:

    def test_message_falls_back_to_registry(self):
        error = DatabaseException("DB_004")

        assert error.message == get_error_definition("DB_004").message
        assert str(error).startswith("[DB_004] ")

    def test_detail_overrides_message(self):
        error = NotFoundException(detail="User with id 'u9' not found", entity_type="User", identifier="u9")

        assert error.message == "User with id 'u9' not found"
        assert isinstance(error, CampusException)

    def test_error_response(self):
        error = NotFoundException("NF_002", entity_type="Club", identifier={"members": "u1"})

        response = error.to_error_response(include_debug=False)

        assert response.error_code == "NF_002"
        assert response.entity_type == "Club"
        assert response.identifier == {"members": "u1"}
        assert response.category == "not_found"
        assert response.debug is None

    def test_error_response_with_debug(self):
        def raise_it():
            return CacheException(identifier="u4", context={"operation": "create"})

        response = raise_it().to_error_response(include_debug=True)

        assert response.debug.function == "raise_it"
        assert response.debug.additional_context == {"operation": "create"}

    def test_debug_info_follows_debug_mode(self, monkeypatch):
        error = DatabaseException("DB_001")

        monkeypatch.setattr(settings, "DEBUG_MODE", "production")
        assert error.to_error_response().debug is None

        monkeypatch.setattr(settings, "DEBUG_MODE", "development")
        assert error.to_error_response().debug is not None

    def test_predicate_identifier_is_named(self):
        def is_teacher(user):
            return True

        response = NotFoundException("NF_002", identifier=is_teacher).to_error_response()

        assert response.identifier == "is_teacher"


class TestSettings:

    def test_require_env(self, monkeypatch):
        monkeypatch.setenv("CAMPUS_TEST_VALUE", "x")
        monkeypatch.delenv("CAMPUS_TEST_MISSING", raising=False)

        assert require_env("CAMPUS_TEST_VALUE") == "x"
        with pytest.raises(ConfigurationException):
            require_env("CAMPUS_TEST_MISSING")

    def test_cache_ttl_override(self, monkeypatch):
        monkeypatch.delenv("CACHE_TTL_USERS", raising=False)
        assert settings.cache_ttl_for("users", 180) == 180

        monkeypatch.setenv("CACHE_TTL_USERS", "30")
        assert settings.cache_ttl_for("users", 180) == 30.0


class TestInterfaceRegistry:

    def test_default_registry(self):
        assert len(default_registry) == len(ENTITY_INTERFACES)
        assert default_registry.get("User") is UserInterface
        assert "Class" in default_registry
        assert UserInterface.relation_fields()[0] == "classes"

    def test_unknown_entity(self):
        with pytest.raises(ConfigurationException):
            default_registry.get("Teacher")
        assert default_registry.find("Teacher") is None

    def test_cache_keys_are_unique(self):
        class Admins(UserInterface):
            name = "Admin"
            collection = "admins"

        with pytest.raises(ConfigurationException) as exc_info:
            InterfaceRegistry([UserInterface, Admins])

        assert exc_info.value.identifier == "users"

    def test_duplicate_name(self):
        class OtherUsers(UserInterface):
            cache_key = "other_users"

        with pytest.raises(ConfigurationException):
            InterfaceRegistry([UserInterface, OtherUsers])

    def test_incomplete_interface(self):
        class Bare(BackendEntityInterface):
            name = "Bare"
            model = User

        with pytest.raises(ConfigurationException):
            InterfaceRegistry([Bare])

    def test_relation_to_unregistered_entity(self):
        class Lockers(BackendEntityInterface):
            name = "Locker"
            model = User
            collection = "lockers"
            cache_key = "lockers"
            relations = (Relation("owner", "User"),)

        with pytest.raises(ConfigurationException):
            build_registry([Lockers])
