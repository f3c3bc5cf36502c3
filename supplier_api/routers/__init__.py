"""Routers package — HTTP endpoint definitions.

Files:
  suppliers.py  — list, get, create, update, delete and search (/ , /getUser, ...)
  reports.py    — PDF report download (/generateReport)

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to supplier_api/services/.
"""
