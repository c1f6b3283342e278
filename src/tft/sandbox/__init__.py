"""Self-testing sandbox for the time-for-trial calculator.

Usage:
    python -m tft.sandbox                # Run all tests
    python -m tft.sandbox court_days     # Court calendar only
    python -m tft.sandbox deadlines      # Deadline engine only
    pytest                               # Same modules, collected by pytest
"""
