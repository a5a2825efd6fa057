"""Flexitime package.

Derives daily and monthly work-time metrics from clock lines kept in plain
day documents. Organized by feature modules (clocking, days, months, ...)
with a store interface for document I/O and a thin Flask controller layer.
"""
