"""Administrator dashboard statistics"""
