"""
Test Suite
==========

Test suite matching the screenshotone/ package structure.

Test Categories:
- unit: Unit tests for individual components
- integration: Round-trips against a local aiohttp server
"""
