"""
core
----

Core reminder engine components:

- ProtocolCatalog:
  Registry of predefined and custom protocol templates, with structural validation.

- Workforce calculator (`required`, `calculate_workforce`, `use_defaults`):
  Convert a cow count and a capacity ratio into staff needed per role.

- ReminderStore:
  Hold the reminders, cows and protocols of one session and apply completions.
"""
