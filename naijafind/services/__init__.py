"""
Business logic for NaijaFind, one module per resource.
"""
