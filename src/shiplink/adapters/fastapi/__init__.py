"""FastAPI adapter – exception mapper and operational routers."""
from shiplink.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from shiplink.adapters.fastapi.routers import FastAPICircuitBreakerRouter, FastAPIHealthRouter

__all__ = [
    "FastAPICircuitBreakerRouter",
    "FastAPIExceptionMapper",
    "FastAPIHealthRouter",
]
