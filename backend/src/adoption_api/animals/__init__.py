"""Animal listings"""
