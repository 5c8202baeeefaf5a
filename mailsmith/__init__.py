"""MailSmith API - AI-assisted email drafting."""

__version__ = "1.0.0"
