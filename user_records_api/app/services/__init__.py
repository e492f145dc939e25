"""
Service layer abstraction.

Services hold the request-level logic for a domain and depend on a
storage gateway passed in at construction time.  They keep no state
between requests.
"""
