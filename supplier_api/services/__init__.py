"""Services package — all business logic lives here, never in routers.

Files:
  supplier.py    — CRUD and search rules for supplier records
  validation.py  — field rules checked before create/update
  report.py      — PDF report rendering for selected suppliers

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
