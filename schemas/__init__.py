# backend/schemas/__init__.py
