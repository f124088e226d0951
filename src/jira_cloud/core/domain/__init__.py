"""Domain layer: DTOs, the response envelope and exceptions.

Nothing in here talks HTTP; the models describe *what* Jira sends and
accepts, not *how* it is fetched.
"""
