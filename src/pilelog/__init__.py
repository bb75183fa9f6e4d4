"""
Telegram bot for logging pile-driving records.
"""

__version__ = "0.1.0"
