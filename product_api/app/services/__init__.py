"""
Service layer.

``product_service`` is the store, ``request_validator`` checks payloads
and ``product_orchestrator`` ties them to token validation.
"""
