"""Client for the Instagram Messaging API: messages, ice breakers, user profiles and webhook events."""

__version__ = "0.1.0"