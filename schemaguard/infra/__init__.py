# schemaguard/infra/__init__.py
