"""
exceptions package
------------------

Guard failures raised by the reminder engine and their HTTP status mapping.
"""
