import pytest

from commonlib.result import Result
from commonlib.storage import StoreError


def test_success_allows_empty_values():
    result = Result.success([])
    assert result.ok
    assert result.unwrap() == []
    assert result.to_dict() == []


def test_failure_carries_error():
    error = StoreError("disk full")
    result = Result.failure(error)
    assert not result.ok
    assert result.error is error
    assert result.to_dict() == {"error": "disk full"}
    with pytest.raises(StoreError, match="disk full"):
        result.unwrap()
