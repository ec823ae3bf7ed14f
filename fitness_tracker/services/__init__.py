"""
Services Module
Business logic layer for the application.

Services take a database session and work on the models; health_metrics
holds the pure formulas the User model delegates to.
"""
