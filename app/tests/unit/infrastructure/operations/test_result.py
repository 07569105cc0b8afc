"""Unit tests for OperationResult and OperationStatus."""

import pytest

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


@pytest.mark.unit
class TestOperationStatus:
    def test_operation_status_values(self):
        assert OperationStatus.SUCCESS.value == "success"
        assert OperationStatus.TRANSIENT_ERROR.value == "transient_error"
        assert OperationStatus.PERMANENT_ERROR.value == "permanent_error"
        assert OperationStatus.NOT_FOUND.value == "not_found"
        assert OperationStatus.CONFLICT.value == "conflict"


@pytest.mark.unit
class TestOperationResultFactories:
    def test_success_factory_minimal(self):
        result = OperationResult.success()
        assert result.status == OperationStatus.SUCCESS
        assert result.is_success
        assert result.message == "ok"

    def test_success_factory_with_data(self):
        data = {"version": "1.1.0"}
        result = OperationResult.success(data=data, message="Updated")
        assert result.data == data
        assert result.message == "Updated"

    def test_error_factory_with_error_code(self):
        result = OperationResult.error(
            OperationStatus.CONFLICT, "Version conflict", error_code="HTTP_409"
        )
        assert result.status == OperationStatus.CONFLICT
        assert result.error_code == "HTTP_409"
        assert not result.is_success

    def test_transient_error_factory(self):
        result = OperationResult.transient_error(
            "Timeout", error_code="TIMEOUT", retry_after=5
        )
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.is_transient
        assert result.retry_after == 5

    def test_permanent_error_factory(self):
        result = OperationResult.permanent_error(
            "Invalid configuration", error_code="HTTP_422", data={"details": []}
        )
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert not result.is_transient
        assert result.data == {"details": []}
