"""Adoption request submission and review"""
