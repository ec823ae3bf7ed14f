"""
Core Module
Configuration, constants, enumerations, exceptions and logging setup.
"""
