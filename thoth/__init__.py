"""HTTP building blocks: URLs, query parameters, headers, percent-encoding, methods and status codes."""

__version__ = "0.1.0a1"

__all__ = ["encoding", "headers", "methods", "query_params", "status", "url"]