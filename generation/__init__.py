"""
Generation app

Builds prompts from the user's resume and job details, sends them to the
Gemini text endpoint, and keeps the cover letters it produces.
"""
