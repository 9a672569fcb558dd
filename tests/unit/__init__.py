"""Unit tests for individual components in isolation.

Coverage:
    - config: Environment loading and validation
    - parsing/: PDF checks before upload
    - storage/: Encoder and endpoint client
    - viewer/: Render loop coalescing and navigation

Follows single responsibility per test function. Leverages pytest-check
for multiple assertions per test.
"""
