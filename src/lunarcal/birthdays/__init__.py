"""Birthday reminders built on the lunar engine.

- arithmetic: countdown, age, Western zodiac
- records: the persisted birthday record
- stats: summary counts and list helpers
"""

__all__ = ["arithmetic", "records", "stats"]
