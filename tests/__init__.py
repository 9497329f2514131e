"""
Test Suite

Structure:
- tests/unit/: Tests for individual components (guard, requests, processors, transport)

HTTP traffic is mocked with httpx.MockTransport. Uses pytest with
pytest-asyncio for the async transport paths.
"""
