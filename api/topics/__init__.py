"""
Topics: router and raw SQL repository.
"""
