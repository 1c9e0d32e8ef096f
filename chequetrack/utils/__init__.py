# chequetrack/utils/__init__.py
