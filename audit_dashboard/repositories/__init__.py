"""Repositories package — persistence behind the Store contract.

Files:
  store.py         — Store ABC + AuditFilter (what services depend on)
  sql_store.py     — durable Store over the per-entity SQLAlchemy repositories
  memory_store.py  — volatile Store over a MemoryDatabase
  base.py          — generic SQLAlchemy BaseRepository
  company.py, user.py, audit.py, news.py — per-entity repositories
  files.py         — uploaded file storage (disk / transient)
"""
