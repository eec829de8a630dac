"""MarkMe attendance store.

This package is organized by feature modules (classes, teachers, attendance)
on top of a small JSON document layer, with an ``AttendanceStore`` facade
for callers.
"""
