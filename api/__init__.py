# backend/api/__init__.py
