import re

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def normalize_email(email):
    """Trim and lowercase an email address"""
    return email.strip().lower()


def is_valid_email(email):
    return bool(EMAIL_PATTERN.match(email))
