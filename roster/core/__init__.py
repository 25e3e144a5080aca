"""
Core utilities shared across the roster API.

This package hosts configuration, logging setup, the error taxonomy and
the FastAPI handlers that turn those errors into JSON envelopes. Routers,
services and repositories depend on these primitives instead of reading
os.environ or building error responses themselves.
"""
