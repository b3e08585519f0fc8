# backend/services/__init__.py
