"""
utils package
-------------

Contains utility modules used throughout the reminder engine.

Includes helpers for configuration constants, logging, date handling, protocol validation and loading bundled data.
"""
