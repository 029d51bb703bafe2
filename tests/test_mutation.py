"""Tests for mutation, raw, explain and error types."""

import pytest

from dc_api_types import (
    ArrayRelationInsertSchema,
    AutoIncrement,
    ColumnInsertSchema,
    CustomUpdateColumnOperatorRowUpdate,
    DeleteMutationOperation,
    ErrorResponse,
    ErrorResponseType,
    ExplainResponse,
    InsertMutationOperation,
    MutationRequest,
    MutationResponse,
    ObjectRelationInsertionOrder,
    ObjectRelationInsertSchema,
    RawRequest,
    RawResponse,
    ResponseRow,
    SetColumnRowUpdate,
    TypeMismatchError,
    UnrecognizedVariantError,
    UpdateMutationOperation,
    decode,
    encode,
)


class TestMutationRequest:
    """Tests for decoding mutation requests."""

    def test_insert_schema(self, mutation_payload) -> None:
        """Test insert field schemas dispatch on their type."""
        request = decode(MutationRequest, mutation_payload)
        schema = request.insert_schema[0]

        assert schema.table == ("Artist",)
        assert schema.primary_key == ("ArtistId",)
        artist_id = schema.fields["ArtistId"]
        assert isinstance(artist_id, ColumnInsertSchema)
        assert isinstance(artist_id.value_generated, AutoIncrement)
        assert schema.fields["Name"].value_generated is None
        assert isinstance(schema.fields["Albums"], ArrayRelationInsertSchema)

    def test_operations(self, mutation_payload) -> None:
        """Test each operation keeps its variant and order."""
        insert, update, delete = decode(MutationRequest, mutation_payload).operations

        assert isinstance(insert, InsertMutationOperation)
        assert insert.rows == ({"Name": "Gojira"},)
        assert insert.post_insert_check is None

        assert isinstance(update, UpdateMutationOperation)
        row_update = update.updates[0]
        assert isinstance(row_update, CustomUpdateColumnOperatorRowUpdate)
        assert row_update.operator_name == "inc"
        assert row_update.value == 1

        assert isinstance(delete, DeleteMutationOperation)
        assert delete.where is None
        assert delete.returning_fields is None

    def test_round_trip(self, mutation_payload) -> None:
        request = decode(MutationRequest, mutation_payload)
        assert encode(request) == mutation_payload
        assert decode(MutationRequest, encode(request)) == request

    def test_object_relation_insertion_order(self) -> None:
        """Test object relation schemas require a known insertion order."""
        schema = decode(
            ObjectRelationInsertSchema,
            {"type": "object_relation", "insertion_order": "before_parent", "relationship": "Artist"},
        )
        assert schema.insertion_order is ObjectRelationInsertionOrder.BEFORE_PARENT

        with pytest.raises(UnrecognizedVariantError) as exc_info:
            decode(
                ObjectRelationInsertSchema,
                {"type": "object_relation", "insertion_order": "sometime", "relationship": "Artist"},
            )
        assert exc_info.value.path == ("insertion_order",)

    def test_unknown_operation_type(self, mutation_payload) -> None:
        mutation_payload["operations"][2]["type"] = "upsert"

        with pytest.raises(UnrecognizedVariantError) as exc_info:
            decode(MutationRequest, mutation_payload)
        assert exc_info.value.path == ("operations", 2)

    def test_set_column_update(self) -> None:
        """Test a set update built natively."""
        update = SetColumnRowUpdate(column="Name", value={"first": "Joe"}, value_type="json")
        assert encode(update) == {
            "type": "set",
            "column": "Name",
            "value": {"first": "Joe"},
            "value_type": "json",
        }


class TestMutationResponse:
    """Tests for mutation results."""

    def test_returning_rows(self) -> None:
        payload = {
            "operation_results": [
                {
                    "affected_rows": 1,
                    "returning": [{"ArtistId": 276, "Albums": {"rows": [{"Title": "Magma"}]}}],
                },
                {"affected_rows": 0},
            ]
        }
        response = decode(MutationResponse, payload)
        first, second = response.operation_results

        assert first.affected_rows == 1
        assert first.returning[0]["ArtistId"] == 276
        assert isinstance(first.returning[0]["Albums"], ResponseRow)
        assert second.returning is None
        assert encode(response) == payload

    def test_negative_affected_rows(self) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            decode(MutationResponse, {"operation_results": [{"affected_rows": -1}]})
        assert exc_info.value.path == ("operation_results", 0, "affected_rows")


class TestRawExplainError:
    """Tests for the raw, explain and error payloads."""

    def test_raw(self) -> None:
        assert encode(RawRequest(query="SELECT 1")) == {"query": "SELECT 1"}
        response = decode(RawResponse, {"rows": [{"one": 1}, {"one": None}]})
        assert response.rows == ({"one": 1}, {"one": None})

    def test_explain(self) -> None:
        response = decode(
            ExplainResponse,
            {"lines": ["SCAN Album"], "query": "SELECT * FROM Album"},
        )
        assert response.lines == ("SCAN Album",)
        assert response.query == "SELECT * FROM Album"

    def test_error_response(self) -> None:
        """Test error types use their kebab-case names."""
        error = decode(
            ErrorResponse,
            {
                "type": "mutation-constraint-violation",
                "message": "duplicate key",
                "details": {"constraint": "Artist_pkey"},
            },
        )
        assert error.type is ErrorResponseType.MUTATION_CONSTRAINT_VIOLATION
        assert error.details == {"constraint": "Artist_pkey"}
        assert encode(ErrorResponse(message="boom")) == {"message": "boom"}
