"""Business logic for auth, tasks and statistics."""
