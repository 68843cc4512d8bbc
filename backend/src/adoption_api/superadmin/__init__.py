"""Cross-tenant administration (super-administrators only)"""
