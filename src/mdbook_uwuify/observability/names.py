# src/mdbook_uwuify/observability/names.py

"""Standard metric names for mdbook-uwuify observability.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Chapter Metrics
# ============================================================================

# Duration
CHAPTER_DURATION = "chapter_duration"

# Counters
CHAPTERS_PROCESSED_TOTAL = "chapters_processed_total"
CHAPTER_ERRORS_TOTAL = "chapter_errors_total"


# ============================================================================
# Text Transform Metrics
# ============================================================================

# Counters
TEXT_EVENTS_TRANSFORMED = "text_events_transformed"
TEXT_BYTES_IN = "text_bytes_in"
TEXT_BYTES_OUT = "text_bytes_out"
