"""Pydantic schemas package.

Folder intent:
  common.py    — ApiModel base, HealthResponse, ErrorResponse
  supplier.py  — supplier create/update payload and response model
  report.py    — body of POST /generateReport
"""
