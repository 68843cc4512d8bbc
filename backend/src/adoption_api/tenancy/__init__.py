"""Tenancy: organization profiles and the tenant authorization policy"""
