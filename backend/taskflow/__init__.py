"""TaskFlow backend: personal task tracking API."""
