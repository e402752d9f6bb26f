"""Server uptime checker."""
