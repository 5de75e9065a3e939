"""HTTP adapter – async HTTP clients for WMS provider APIs."""
from shiplink.adapters.http.client import HttpClient, HttpxHttpClient
from shiplink.adapters.http.circuit_client import CircuitBreakingHttpClient

__all__ = ["CircuitBreakingHttpClient", "HttpClient", "HttpxHttpClient"]
