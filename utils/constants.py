import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Expose constants as variables
INELIGIBLE_STATUSES = set(_constants["INELIGIBLE_STATUSES"])
DEFAULT_PRIORITY = _constants["DEFAULT_PRIORITY"]
PROTOCOL_TASK_TYPE = _constants["PROTOCOL_TASK_TYPE"]

MIN_PROTOCOL_STEPS = _constants["MIN_PROTOCOL_STEPS"]
MIN_PROTOCOL_DURATION = _constants["MIN_PROTOCOL_DURATION"]
MAX_PROTOCOL_DURATION = _constants["MAX_PROTOCOL_DURATION"]

FORECAST_WINDOW_DAYS = _constants["FORECAST_WINDOW_DAYS"]
DEFAULT_WORKFORCE_REQUIREMENTS = _constants["DEFAULT_WORKFORCE_REQUIREMENTS"]
