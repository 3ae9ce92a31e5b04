import pytest

from talent_portal.monitoring.prometheus_metrics import prometheus_metrics
from talent_portal.services.base import BaseService


class SampleService(BaseService):
    @BaseService.measure_operation("double")
    def double(self, value):
        if value < 0:
            raise ValueError("negative")
        return value * 2

    @BaseService.measure_operation("double_async")
    async def double_async(self, value):
        return value * 2


def test_sync_operation_is_measured():
    service = SampleService()

    assert service.double(2) == 4
    with pytest.raises(ValueError):
        service.double(-1)

    metrics = service.get_metrics()["double"]
    assert metrics["count"] >= 2
    assert 0 < metrics["success_rate"] < 1


@pytest.mark.asyncio
async def test_async_operation_is_measured():
    service = SampleService()

    assert await service.double_async(3) == 6

    assert service.get_metrics()["double_async"]["count"] >= 1
    exposition = prometheus_metrics.get_metrics().decode()
    assert 'service="SampleService"' in exposition
    assert 'operation="double_async"' in exposition


def test_decorated_method_keeps_its_name():
    assert SampleService.double.__name__ == "double"
    assert SampleService.double_async.__name__ == "double_async"
