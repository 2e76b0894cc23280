"""
Application services (use cases).

Each module exposes a service object orchestrating repositories and raising
ForumError subclasses that the app maps to HTTP responses.
"""
