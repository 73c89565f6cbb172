"""Attendance Tracker package.

Offline-first attendance tracking (check-in/check-out, leave requests, leave
types, settings) organized by feature modules, with a local embedded store,
repository/service layers and a thin Flask controller layer.
"""
