"""
Articles: collection query engine, router, service and raw SQL repository.
"""
