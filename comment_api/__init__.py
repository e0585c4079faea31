"""
REST API сервиса комментариев.
"""

__version__ = "1.0.0"
