# src/osu_kit/observability/names.py

"""Standard metric names for osu-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSER_PARSE_DURATION = "parser_parse_duration"

# Counters
PARSER_DOCUMENTS_TOTAL = "parser_documents_total"
PARSER_DIAGNOSTICS_TOTAL = "parser_diagnostics_total"
PARSER_LINES_TOTAL = "parser_lines_total"


# ============================================================================
# Retention Metrics
# ============================================================================

# Duration
RETENTION_SELECTION_DURATION = "retention_selection_duration"

# Gauges
RETENTION_FILES_SELECTED = "retention_files_selected"
