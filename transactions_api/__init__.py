"""
Transactions Service

FastAPI service exposing CRUD endpoints over the Transactions table.
"""
