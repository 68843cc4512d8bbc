"""Administrator authentication: password hashing, session tokens, claims"""
