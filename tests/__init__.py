"""
Tests package for the schedulytics backend.

This package contains test suites organized by type:
- unit/: Layer-by-layer tests with in-memory or mocked collaborators
- integration/: In-process gRPC server exercised through real stubs
- contracts/: Repository contract tests
"""
