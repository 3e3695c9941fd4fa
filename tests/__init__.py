"""
Test suite for the SwiftConvert client.

Provides:
- Unit tests for compatibility, validation, payloads and downloads
- Operation client tests against a mock transport
- Session state machine tests
- HTTP surface tests
"""
