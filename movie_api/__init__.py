"""
Movie API - users, favorites and a read-only movie catalog behind JWT auth.
"""
