"""
Version 1 of the API.

Version 1 is served from the application root so that existing clients
keep using ``/books``, ``/movies`` and friends without a prefix.
"""
