"""
API package.

``router`` aggregates the domain routers defined in ``endpoints``;
``deps`` holds the FastAPI dependencies shared by those routers.
"""
