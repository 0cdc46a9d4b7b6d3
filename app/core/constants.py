"""Application constants such as seed records and error messages."""

USER_NOT_FOUND = "User not found"
PAGE_TITLE = "User Profiles"

# (id, fullName, emoji) in the order the store is seeded
DEMO_USERS = (
    ("1", "John Doe", "😀"),
    ("2", "Jane Smith", "🚀"),
    ("3", "Robert Johnson", "🎸"),
)
