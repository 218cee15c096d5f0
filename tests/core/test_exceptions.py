"""Tests for the exception hierarchy."""

from neo_fetch.core.exceptions import (
    FetchCycleError,
    InvalidPageSizeError,
    NeoFetchError,
    ValidationError,
    create_error_report,
)


class TestExceptions:
    
    def test_error_code_defaults_to_class_name(self):
        error = InvalidPageSizeError("Page size must be > 0")
        
        assert error.error_code == "InvalidPageSizeError"
        assert error.details == {}
        assert isinstance(error, ValidationError)
        assert isinstance(error, ValueError)
        assert isinstance(error, NeoFetchError)
    
    def test_fetch_cycle_error_details(self):
        error = FetchCycleError("Fetch for page 2 failed", page_num=2, page_size=10, params={"num": 2})
        
        assert error.details == {"page_num": 2, "page_size": 10, "params": {"num": 2}}
        assert error.page_num == 2
    
    def test_error_report(self):
        error = FetchCycleError("Fetch for page 1 failed", page_num=1, page_size=20)
        
        report = create_error_report(error)
        
        assert report == {
            "error": {
                "code": "FetchCycleError",
                "message": "Fetch for page 1 failed",
                "details": {"page_num": 1, "page_size": 20},
                "type": "FetchCycleError",
            }
        }
