"""
Application Layer for the FitTrack API.

This package contains:
- ports/: Abstract repository interfaces (what the application needs)
- use_cases/: Application services coordinating the auth flow
- exceptions.py: Error taxonomy shared with the API layer
"""
