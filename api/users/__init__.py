"""
Users: router and raw SQL repository.
"""
