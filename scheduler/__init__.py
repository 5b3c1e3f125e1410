"""
scheduler
---------

Reminder scheduling module. Initializes key components:

- `protocol_scheduler`: Expands a protocol applied to a cow into dated reminders.
- `grouping`: Groups reminders by task for display and staffing.
- `forecast`: Day-by-day workforce projection over a window.
- `analytics`: Herd counters over the store snapshot.

Provides high-level access to core scheduling functionality.
"""
from . import protocol_scheduler, grouping, forecast, analytics
