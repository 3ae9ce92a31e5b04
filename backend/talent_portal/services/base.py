# backend/talent_portal/services/base.py
"""
Base Service Pattern for the Talent Portal

Provides common functionality for all service classes including:
- Logging
- Error handling
- Performance monitoring
"""

import asyncio
from functools import wraps
import logging
import time
from typing import Any, Callable, Dict, Optional, TypeVar, cast

from sqlalchemy.orm import Session

from ..monitoring.prometheus_metrics import prometheus_metrics

logger = logging.getLogger(__name__)

SLOW_OPERATION_SECONDS = 1.0

F = TypeVar("F", bound=Callable[..., Any])


class BaseService:
    """
    Base class for all service layer components.

    Provides common patterns for:
    - Database session management
    - Logging
    - Performance monitoring
    """

    # Class-level metrics storage
    _class_metrics: Dict[str, Dict[str, Dict[str, float]]] = {}

    def __init__(self, db: Optional[Session] = None):
        """
        Initialize base service.

        Args:
            db: Database session (None for services that never touch the store)
        """
        self.db = db
        self.logger = logging.getLogger(self.__class__.__name__)

    @staticmethod
    def measure_operation(operation_name: str) -> Callable[[F], F]:
        """
        Decorator to measure operation performance.

        Usage:
            @BaseService.measure_operation("search_profiles")
            async def search(self, query):
                ...

        Works for both sync and async methods.
        """

        def decorator(func: F) -> F:
            func._operation_name = operation_name  # type: ignore[attr-defined]

            if not asyncio.iscoroutinefunction(func):

                @wraps(func)
                def wrapper(self, *args, **kwargs):
                    start_time = time.time()
                    error_type = None
                    try:
                        return func(self, *args, **kwargs)
                    except Exception as e:
                        error_type = type(e).__name__
                        raise
                    finally:
                        _finish_measurement(self, operation_name, start_time, error_type)

                return cast(F, wrapper)

            @wraps(func)
            async def async_wrapper(self, *args, **kwargs):
                start_time = time.time()
                error_type = None
                try:
                    return await func(self, *args, **kwargs)
                except Exception as e:
                    error_type = type(e).__name__
                    raise
                finally:
                    _finish_measurement(self, operation_name, start_time, error_type)

            return cast(F, async_wrapper)

        return decorator

    def log_operation(self, operation: str, **context):
        """
        Log an operation with context.

        Args:
            operation: Operation name
            **context: Additional context to log
        """
        self.logger.info(f"Operation: {operation}", extra={"operation": operation, **context})

    def _record_metric(self, operation: str, elapsed: float, success: bool) -> None:
        class_name = self.__class__.__name__
        metrics = BaseService._class_metrics.setdefault(class_name, {})
        if operation not in metrics:
            metrics[operation] = {
                "count": 0,
                "total_time": 0.0,
                "success_count": 0,
                "failure_count": 0,
                "min_time": float("inf"),
                "max_time": 0.0,
            }

        metric_data = metrics[operation]
        metric_data["count"] += 1
        metric_data["total_time"] += elapsed
        metric_data["min_time"] = min(metric_data["min_time"], elapsed)
        metric_data["max_time"] = max(metric_data["max_time"], elapsed)
        if success:
            metric_data["success_count"] += 1
        else:
            metric_data["failure_count"] += 1

    def get_metrics(self) -> Dict[str, Any]:
        """
        Get performance metrics for this service.

        Returns:
            Dictionary with metrics for each measured operation
        """
        class_name = self.__class__.__name__
        result = {}
        for operation, data in BaseService._class_metrics.get(class_name, {}).items():
            count = data["count"]
            if count == 0:
                continue
            result[operation] = {
                "count": count,
                "avg_time": data["total_time"] / count,
                "min_time": data["min_time"],
                "max_time": data["max_time"],
                "success_rate": data["success_count"] / count,
            }
        return result


def _finish_measurement(
    service: Any, operation_name: str, start_time: float, error_type: Optional[str]
) -> None:
    elapsed = time.time() - start_time
    success = error_type is None

    if hasattr(service, "_record_metric"):
        service._record_metric(operation_name, elapsed, success)

    if elapsed > SLOW_OPERATION_SECONDS and hasattr(service, "logger"):
        service.logger.warning(f"Slow operation detected: {operation_name} took {elapsed:.2f}s")

    prometheus_metrics.record_service_operation(
        service=service.__class__.__name__,
        operation=operation_name,
        duration=elapsed,
        status="success" if success else "error",
        error_type=error_type,
    )
