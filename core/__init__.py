# backend/core/__init__.py
