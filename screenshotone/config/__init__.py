"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Credentials, API endpoint and transport settings
- logging: Structured logging configuration
"""
