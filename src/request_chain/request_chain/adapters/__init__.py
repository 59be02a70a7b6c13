# ABOUTME: Host adapters package
# ABOUTME: Exports adapters exposing handler chains to web frameworks

from .starlette import as_starlette_endpoint, build_chain_request, read_body, read_query, render_response

__all__ = ["as_starlette_endpoint", "build_chain_request", "read_body", "read_query", "render_response"]
