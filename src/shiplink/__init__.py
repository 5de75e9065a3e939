"""
shiplink – shared platform code for the shipments / WMS integration backend.

Import path convention::

    from shiplink.resilience import CircuitBreakerRegistry, CircuitOpenError
    from shiplink.adapters.http import CircuitBreakingHttpClient
    from shiplink.adapters.fastapi import FastAPICircuitBreakerRouter
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
