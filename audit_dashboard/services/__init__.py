"""Services package — all business logic lives here, never in routers.

Files:
  audit.py    — audit registry (upload validation, listing, deletion)
  news.py     — news registry
  company.py  — company lookups with per-company statistics
  stats.py    — aggregation engine (status / company breakdown, recent count)
  auth.py     — access gate (login, token verification, admin management)
  seed.py     — default companies + admin at startup

Rule: routers call services, services call the Store, the Store calls the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
