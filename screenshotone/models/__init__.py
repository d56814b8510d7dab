"""
Data Models
===========

Parameter vocabulary and Pydantic models used across the client.

Models:
- parameters: Closed enumeration of ``/take`` query parameter names
- schemas: Credentials model
"""
