"""
HTTP surface of the admin: schemas, dependencies and endpoints.
"""
