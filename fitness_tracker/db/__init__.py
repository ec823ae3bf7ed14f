"""
Database Module
Declarative base, engine and session helpers.
"""
