import inspect
import logging
from time import monotonic
from typing import Any

from fncall_kit.observability import names
from fncall_kit.observability.base import MetricsHook, NoOpMetricsHook

from .binder import invoke
from .function_registry import FunctionRegistry
from .models import FunctionCall

logger = logging.getLogger(__name__)


class FunctionEngine:
    def __init__(
        self,
        function_registry: FunctionRegistry,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
        coerce: bool = True,
    ) -> None:
        self.function_registry = function_registry
        self.metrics_hook = metrics_hook
        self.coerce = coerce

    async def call(self, function_call: FunctionCall) -> Any:
        logger.debug("Calling function: %s", function_call.name)
        start = monotonic()
        labels = {"function": function_call.name}
        entry = self.function_registry.get(function_call.name)

        try:
            result = invoke(
                entry.func, function_call.decode_arguments(), coerce=self.coerce
            )
            # Check if the function was async
            if inspect.isawaitable(result):
                result = await result
        except Exception:
            self.metrics_hook.increment(names.FUNCTION_ERRORS_TOTAL, labels=labels)
            logger.warning("Function call failed: %s", function_call.name)
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.FUNCTION_CALL_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.FUNCTION_CALLS_TOTAL, labels=labels)
        return result
