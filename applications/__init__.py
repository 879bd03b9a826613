"""
Applications app

Tracks the user's job applications: where they applied, the current status,
and which resume version and cover letter went with each one.
"""
