"""Routers package — HTTP endpoint definitions, mounted under settings.api_prefix.

Files:
  deps.py       — shared dependencies (Store per request, current user)
  auth.py       — /auth/*
  companies.py  — /companies/*
  audits.py     — /audits/* (incl. multipart upload and stats overview)
  news.py       — /news/*

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to audit_dashboard/services/.
"""
