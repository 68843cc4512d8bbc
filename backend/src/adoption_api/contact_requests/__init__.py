"""Shelter onboarding requests"""
