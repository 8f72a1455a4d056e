"""
Ziplan API
HTTP routing layer
"""
