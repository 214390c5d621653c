"""
Todo Auth API - Tasks Module

Shared task list, readable and appendable by any authenticated user.
"""
