"""
Comments: router, service and raw SQL repository.
"""
