"""Scenario-style integration tests for end-to-end validation behaviors."""

from __future__ import annotations

import copy

import pytest
from response_schema_validator import (
    PathLocator,
    ResponseDefinitionNotFoundError,
    ValidationEngine,
    validate_schema,
)
from response_schema_validator.configuration import DEFAULT_ISSUE_STYLES

_PERSON_SCHEMA = {
    "type": "object",
    "properties": {"name": {"type": "string"}, "age": {"type": "number"}},
    "required": ["name", "age"],
}

_OPENAPI_DOCUMENT = {
    "openapi": "3.0.3",
    "info": {"title": "Users", "version": "1.0.0"},
    "paths": {
        "/users": {
            "get": {
                "responses": {
                    "200": {
                        "description": "A user",
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/User"}
                            }
                        },
                    }
                }
            }
        }
    },
    "components": {
        "schemas": {
            "User": {
                "type": "object",
                "properties": {"name": {"type": "string"}},
                "required": ["name"],
            }
        }
    },
}

_SWAGGER_DOCUMENT = {
    "swagger": "2.0",
    "info": {"title": "Pets", "version": "1.0.0"},
    "paths": {
        "/pets": {
            "get": {
                "responses": {
                    "default": {
                        "description": "Pet list",
                        "schema": {"type": "array", "items": {"$ref": "#/definitions/Pet"}},
                    }
                }
            }
        }
    },
    "definitions": {
        "Pet": {
            "type": "object",
            "properties": {
                "id": {"type": "integer"},
                "owner": {"type": "string", "format": "email"},
            },
            "required": ["id"],
        }
    },
}


@pytest.fixture()
def engine() -> ValidationEngine:
    return ValidationEngine()


def test_plain_schema_with_valid_data_has_no_errors(engine: ValidationEngine) -> None:
    data = {"name": "John Wick", "age": 49}

    outcome = validate_schema(data, _PERSON_SCHEMA, engine=engine)

    assert outcome.errors is None
    assert outcome.data_mismatches == data


def test_missing_required_property_is_flagged_without_touching_input(
    engine: ValidationEngine,
) -> None:
    data = {"name": "John Wick"}
    original = copy.deepcopy(data)

    outcome = validate_schema(data, _PERSON_SCHEMA, engine=engine)

    assert outcome.data_mismatches["age"] == (
        f"{DEFAULT_ISSUE_STYLES.icon_property_missing} Missing property 'age'"
    )
    assert data == original


def test_type_mismatch_renders_value_and_message(engine: ValidationEngine) -> None:
    data = {"name": 123, "age": 49}

    outcome = validate_schema(data, _PERSON_SCHEMA, engine=engine)

    assert outcome.data_mismatches == {
        "name": f"{DEFAULT_ISSUE_STYLES.icon_property_error} 123 123 is not of type 'string'",
        "age": 49,
    }


def test_openapi_reference_resolves_to_component(engine: ValidationEngine) -> None:
    outcome = validate_schema(
        {},
        _OPENAPI_DOCUMENT,
        PathLocator(endpoint="/users", method="GET", status=200),
        engine=engine,
    )

    assert outcome.errors is not None
    assert len(outcome.errors) == 1
    (issue,) = outcome.errors
    assert issue.keyword == "required"
    assert issue.missing_property == "name"


def test_swagger_default_response_is_used_when_status_is_missing(
    engine: ValidationEngine,
) -> None:
    data = [{"id": 1, "owner": "ada@example.com"}, {"id": "2", "owner": "nobody"}, {}]

    outcome = validate_schema(data, _SWAGGER_DOCUMENT, {"endpoint": "/pets"}, engine=engine)

    error_icon = DEFAULT_ISSUE_STYLES.icon_property_error
    assert outcome.data_mismatches == [
        {"id": 1, "owner": "ada@example.com"},
        {
            "id": f"{error_icon} '2' '2' is not of type 'integer'",
            "owner": f"{error_icon} 'nobody' 'nobody' is not a 'email'",
        },
        {"id": f"{DEFAULT_ISSUE_STYLES.icon_property_missing} Missing property 'id'"},
    ]


def test_unknown_endpoint_names_both_attempted_paths(engine: ValidationEngine) -> None:
    with pytest.raises(ResponseDefinitionNotFoundError) as excinfo:
        validate_schema({}, _OPENAPI_DOCUMENT, {"endpoint": "/orders"}, engine=engine)

    assert "paths./orders.get.responses.200" in str(excinfo.value)
    assert "paths./orders.get.responses.default" in str(excinfo.value)


def test_repeated_calls_produce_equal_outcomes(engine: ValidationEngine) -> None:
    data = {"name": 5}

    first = validate_schema(data, _OPENAPI_DOCUMENT, {"endpoint": "/users"}, engine=engine)
    second = validate_schema(data, _OPENAPI_DOCUMENT, {"endpoint": "/users"}, engine=engine)

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_overriding_missing_icon_keeps_default_error_icon(engine: ValidationEngine) -> None:
    outcome = validate_schema(
        {"name": 1},
        _PERSON_SCHEMA,
        issue_styles={"iconPropertyMissing": "MISSING"},
        engine=engine,
    )

    assert outcome.issue_styles.icon_property_missing == "MISSING"
    assert outcome.issue_styles.icon_property_error == DEFAULT_ISSUE_STYLES.icon_property_error
    assert outcome.data_mismatches["age"] == "MISSING Missing property 'age'"
