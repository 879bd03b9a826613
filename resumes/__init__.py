"""
Resumes app

Per-user resume file storage plus the ledger of AI-tweaked resume versions.
"""
