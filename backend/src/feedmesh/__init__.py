"""
FeedMesh Backend - Social feed with real-time notifications

Pseudonymous posting, likes, comments and live notification delivery.

Version: 1.0.0
"""

__version__ = "1.0.0"
