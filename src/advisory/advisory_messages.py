# src/advisory/advisory_messages.py
"""
Advisory Messages
=================

Fixed texts used by the Jal Assistant in offline mode.

This module defines:
    - Assistant name and identity
    - Canned sentences for empty data and fixed facts
    - Disease-specific precaution lists
    - Alerts and recommendations attached to simulated reports

╔════════════════════════════════════════════════════════════════════════════╗
║  IMPORTANT: These strings are shown verbatim on the dashboard.            ║
║  Changing wording changes observable output of every advisory call.       ║
╚════════════════════════════════════════════════════════════════════════════╝
"""

# =============================================================================
# ASSISTANT IDENTITY
# =============================================================================

JAL_ASSISTANT_NAME = "Jal Assistant (Offline)"

JAL_ASSISTANT_DESCRIPTION = (
    "Water-borne disease and drinking-water quality helper. "
    "Answers are built locally from the dashboard data, no external AI service is called."
)


# =============================================================================
# EMPTY DATA / FIXED FACTS
# =============================================================================

NO_STATE_DATA_RESPONSE = "No state disease data is available yet."

NO_WATER_DATA_RESPONSE = "No recent water quality reports are available."

PH_RANGE_FACT = "The safe pH range for drinking water is 6.5 to 8.5."

OFFLINE_MODE_NOTICE = "I am running in offline mode without external AI APIs."

VERDICT_SAFE = "within safe range"
VERDICT_ATTENTION = "needs attention"


# =============================================================================
# HEALTH REPORT
# =============================================================================

DEFAULT_TOP_CONCERN = "water-borne disease"

HEALTH_REPORT_RECOMMENDATION = (
    "RECOMMENDATION: Prioritize chlorination checks and ORS stock "
    "in high-burden districts this week."
)


# =============================================================================
# PREVENTIVE MEASURES
# =============================================================================

DEFAULT_PREVENTIVE_MEASURES = (
    "Drink boiled or filtered water",
    "Wash hands with soap before meals",
    "Avoid uncovered street food",
)

CHOLERA_PREVENTIVE_MEASURES = (
    "Use chlorinated drinking water",
    "Wash fruits and utensils with clean water",
    "Use ORS and seek care immediately for severe diarrhea",
)

TYPHOID_PREVENTIVE_MEASURES = (
    "Drink safe water only",
    "Avoid raw cut fruits from unknown vendors",
    "Complete prescribed antibiotics from a doctor",
)


# =============================================================================
# SIMULATED REPORTS
# =============================================================================

SIMULATED_REPORT_ALERTS = (
    "Simulated Alert: Data based on historical averages due to connection issue.",
)

SIMULATED_REPORT_RECOMMENDATIONS = (
    "Check internet connection or API quota.",
    "Verify field data manually before taking action.",
    "Proceed with standard operating procedures.",
)
