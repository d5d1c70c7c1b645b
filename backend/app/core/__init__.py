# app/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- db: Database configuration and connection management
- errors: Application exception hierarchy and their JSON rendering
- security: Password hashing and auth token handling
"""
