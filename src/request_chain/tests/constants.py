# ABOUTME: Test constants and shared values for the request chain test suite
# ABOUTME: Provides configurable timeouts and fixed request data for consistent testing

import os
from typing import Final


class TestTimeouts:
    """Configurable timeout constants for different test scenarios."""

    QUICK_OPERATION: Final[float] = float(os.getenv("TEST_QUICK_TIMEOUT", "0.1"))
    STANDARD_OPERATION: Final[float] = float(os.getenv("TEST_STANDARD_TIMEOUT", "0.2"))
    SLOW_OPERATION: Final[float] = float(os.getenv("TEST_SLOW_TIMEOUT", "0.5"))


class TestRequestData:
    """Request values shared by unit and integration tests."""

    USER_ID: Final[str] = "1"
    UUID: Final[str] = "0f8fad5b-d9cb-469f-a165-70867728950e"
    INVALID_UUID: Final[str] = "not-a-uuid"
    USERNAME: Final[str] = "test1"
    PASSWORD: Final[str] = "test2"
    ORGANIZATION: Final[str] = "test3"
    FILTERS: Final[str] = "test4"
    AUTHORIZATION: Final[str] = "test5"
