# src/fncall_kit/observability/names.py

"""Standard metric names for fncall-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# Chat Completion Metrics
# ============================================================================

# Duration
CHAT_COMPLETION_DURATION = "chat_completion_duration"

# Counters
CHAT_REQUESTS_TOTAL = "chat_requests_total"
CHAT_ERRORS_TOTAL = "chat_errors_total"

# Counters (token usage - monotonic over time for cost/rate tracking)
CHAT_TOKENS_PROMPT = "chat_tokens_prompt"
CHAT_TOKENS_COMPLETION = "chat_tokens_completion"
CHAT_TOKENS_TOTAL = "chat_tokens_total"

# Gauges
CHAT_FUNCTIONS_OFFERED = "chat_functions_offered"


# ============================================================================
# Function Call Metrics
# ============================================================================

# Duration
FUNCTION_CALL_DURATION = "function_call_duration"

# Counters
FUNCTION_CALLS_TOTAL = "function_calls_total"
FUNCTION_ERRORS_TOTAL = "function_errors_total"
