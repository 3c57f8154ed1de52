"""
CRUD operations
"""
