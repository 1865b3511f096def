# schemaguard/core/__init__.py
