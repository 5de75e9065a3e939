"""Unit tests for observability health checks."""
import asyncio

from shiplink.kernel.time import FrozenClock
from shiplink.observability.health import (
    CircuitBreakerHealthCheck,
    HealthCheck,
    HealthRegistry,
    HealthStatus,
    LambdaHealthCheck,
)
from shiplink.resilience.circuit_breaker import CircuitBreakerRegistry, CircuitBreakerState


class _OkCheck(HealthCheck):
    @property
    def name(self) -> str:
        return "ok_check"

    async def check(self) -> HealthStatus:
        return HealthStatus(healthy=True, detail="all good")


class _BoomCheck(HealthCheck):
    @property
    def name(self) -> str:
        return "boom"

    async def check(self) -> HealthStatus:
        raise RuntimeError("unexpected crash")


class TestHealthRegistry:
    def test_all_healthy(self):
        reg = HealthRegistry()
        reg.register(_OkCheck())
        report = asyncio.run(reg.run_all())
        assert report.overall is True
        assert report.results["ok_check"].detail == "all good"

    def test_exception_captured_as_failure(self):
        reg = HealthRegistry()
        reg.register(_OkCheck())
        reg.register(_BoomCheck())
        report = asyncio.run(reg.run_all())
        assert report.overall is False
        assert "unexpected crash" in report.results["boom"].detail

    def test_lambda_check(self):
        async def probe() -> HealthStatus:
            return HealthStatus(healthy=False, detail="down")

        reg = HealthRegistry()
        reg.register(LambdaHealthCheck("lambda", probe))
        report = asyncio.run(reg.run_all())
        assert report.to_dict()["checks"]["lambda"]["detail"] == "down"

    def test_slow_check_times_out(self):
        class _SlowCheck(_OkCheck):
            timeout = 0.01

            async def check(self) -> HealthStatus:
                await asyncio.sleep(1)
                return HealthStatus(healthy=True)

        status = asyncio.run(_SlowCheck().timed_check())
        assert status.healthy is False
        assert "timed out" in (status.detail or "")

    def test_register_replaces_same_name_and_unregister(self):
        reg = HealthRegistry()
        reg.register(_OkCheck())
        reg.register(_OkCheck())
        assert reg.names() == ["ok_check"]
        reg.unregister("ok_check")
        reg.unregister("ghost")
        assert asyncio.run(reg.run_all()).overall is True

    def test_report_status_and_failing(self):
        reg = HealthRegistry()
        reg.register(_OkCheck())
        reg.register(_BoomCheck())
        report = asyncio.run(reg.run_all())
        assert report.status == "degraded"
        assert report.failing() == ["boom"]
        assert report.to_dict()["status"] == "degraded"

    def test_to_dict_omits_empty_data(self):
        reg = HealthRegistry()
        reg.register(_OkCheck())
        checks = asyncio.run(reg.run_all()).to_dict()["checks"]
        assert "data" not in checks["ok_check"]
        assert checks["ok_check"]["latency_ms"] >= 0


class TestCircuitBreakerHealthCheck:
    def test_healthy_when_all_closed(self):
        registry = CircuitBreakerRegistry(clock=FrozenClock())
        registry.get_breaker("wms:shiphero")
        status = asyncio.run(CircuitBreakerHealthCheck(registry).check())
        assert status.healthy is True
        assert status.data["wms:shiphero"]["state"] == "closed"

    def test_unhealthy_when_any_open(self):
        registry = CircuitBreakerRegistry(clock=FrozenClock())
        registry.get_breaker("wms:trackstar").force_state(CircuitBreakerState.OPEN)
        registry.get_breaker("wms:shiphero").force_state(CircuitBreakerState.OPEN)
        registry.get_breaker("webhook:e1")
        status = asyncio.run(CircuitBreakerHealthCheck(registry).check())
        assert status.healthy is False
        assert status.detail == "open: wms:shiphero, wms:trackstar"
        assert set(status.data) == {"wms:trackstar", "wms:shiphero", "webhook:e1"}

    def test_half_open_is_healthy(self):
        registry = CircuitBreakerRegistry(clock=FrozenClock())
        registry.get_breaker("svc").force_state(CircuitBreakerState.HALF_OPEN)
        status = asyncio.run(CircuitBreakerHealthCheck(registry).check())
        assert status.healthy is True

    def test_registered_name(self):
        registry = CircuitBreakerRegistry()
        reg = HealthRegistry()
        reg.register(CircuitBreakerHealthCheck(registry, name_="integrations"))
        report = asyncio.run(reg.run_all())
        assert "integrations" in report.results
