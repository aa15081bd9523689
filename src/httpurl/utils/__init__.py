"""src/httpurl/utils/__init__.py"""
