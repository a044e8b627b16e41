"""Tests for the error collector and operation results."""

from storage_gateway.domain import (
    ErrorCollector,
    ErrorKind,
    ErrorRecord,
    OperationError,
    OperationResult,
)


class TestErrorCollector:
    """Test ErrorCollector accumulation and clearing."""

    def test_starts_empty(self):
        collector = ErrorCollector()
        assert not collector.has_errors()
        assert collector.get_all_errors() == []

    def test_add_error_preserves_order(self):
        collector = ErrorCollector()
        collector.add_error("first", {"bucket": "a"})
        collector.add_error("second")

        records = collector.get_all_errors()
        assert collector.has_errors()
        assert [r.message for r in records] == ["first", "second"]
        assert records[0].context == {"bucket": "a"}
        assert records[1].context == {}

    def test_no_deduplication(self):
        collector = ErrorCollector()
        collector.add_error("same", {"key": "k"})
        collector.add_error("same", {"key": "k"})
        assert len(collector) == 2

    def test_get_all_errors_returns_snapshot(self):
        collector = ErrorCollector()
        collector.add_error("first")
        snapshot = collector.get_all_errors()

        collector.add_error("second")
        collector.clear()

        assert snapshot == [ErrorRecord(message="first")]

    def test_clear_removes_everything(self):
        collector = ErrorCollector()
        for i in range(3):
            collector.add_error(f"failure {i}")

        collector.clear()

        assert not collector.has_errors()
        assert collector.get_all_errors() == []

    def test_collectors_are_independent(self):
        first = ErrorCollector()
        second = ErrorCollector()
        first.add_error("only in first")
        assert not second.has_errors()


class TestOperationResult:
    """Test OperationResult success and failure shapes."""

    def test_success_with_value(self):
        result = OperationResult.success(["a"])
        assert result.ok
        assert result.value == ["a"]
        assert result.error is None

    def test_success_without_value(self):
        result = OperationResult.success()
        assert result.ok
        assert result.value is None

    def test_empty_list_is_not_failure(self):
        result = OperationResult.success([])
        assert result.ok
        assert result.value == []

    def test_failure_has_none_value(self):
        error = OperationError(
            kind=ErrorKind.STORAGE, message="list_objects failed", context={}
        )
        result = OperationResult.failure(error)
        assert not result.ok
        assert result.value is None
        assert result.error.kind is ErrorKind.STORAGE
