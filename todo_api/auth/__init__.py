"""
Todo Auth API - Authentication Module

Register/login with bcrypt password hashing and JWT bearer tokens.
Routers are imported from ``todo_api.auth.router`` by the app factory.
"""
