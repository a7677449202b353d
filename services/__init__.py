"""
Service layer for the DynamoDB mirror and the AT Protocol record service.

This module keeps external calls behind small service classes so the
handler can be exercised with test doubles.
"""
