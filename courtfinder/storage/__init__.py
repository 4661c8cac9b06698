"""
Device-local annotation storage.

Responsibilities:
- Persist named JSON slots in a local data directory.
- Keep the user's favorite court ids.
- Keep star-rated reviews per court, newest first.
- Degrade to empty state when stored data is missing or corrupt.
"""
