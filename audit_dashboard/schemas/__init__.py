"""Pydantic schemas package.

Folder intent:
  common.py   — ApiModel base + HealthResponse (all schemas inherit ApiModel)
  auth.py     — login / verify / admin management bodies
  company.py  — company listing with per-company counts
  audit.py    — audit records
  news.py     — news create / partial update / output
  stats.py    — /audits/stats/overview response
"""
