"""
Shared service utilities.

- http.py - requests session with fixed timeout and single attempt
"""
