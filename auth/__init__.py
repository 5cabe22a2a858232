"""
Auth module: credential hashing, user stores, and the onboarding, login and
profile-read services.
"""
