"""Reusable string helpers.

Keep this package thin. Each helper binds to a standard library routine
where one exists.
"""
