"""
Application Layer for the progression engine.

This package contains:
- ports/: Abstract repository interfaces (what the engine needs)
- use_cases/: Save-time validation of progression configuration
- exceptions: Errors shared by the application and engine layers
"""
