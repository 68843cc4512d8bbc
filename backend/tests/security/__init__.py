"""Security tests for the adoption API

This package covers:
- SQL injection through path, query and body parameters
- Authentication bypass attempts (missing, forged and expired tokens)
- Tenant escape between organizations
"""
