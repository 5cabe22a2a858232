"""
Domain services: profile parsing, CIBIL scoring, and upload file handling.
"""
