"""
Core Client Logic
=================

Request building, signing and transport for the ScreenshotOne API.

Modules:
- options: Take options builder and canonical query encoding
- client: Async client, URL signing and error types
- sync_client: Blocking facade over the async client
"""
