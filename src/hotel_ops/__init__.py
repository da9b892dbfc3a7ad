"""Hotel Ops shift availability package.

This package is organized by feature modules (shifts, schedules, availability,
workers) with a thin Flask controller layer over pure service code.
"""
