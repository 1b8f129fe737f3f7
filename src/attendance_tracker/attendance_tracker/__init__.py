"""Attendance Tracker package.

Feature modules (attendance, profiles, reports, access) with a thin Flask
controller layer over service/repository layers.
"""
