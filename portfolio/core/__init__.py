"""
Core utilities shared across the portfolio API.

Configuration, logging, error types, admin authentication, rate limiting and
the e-mail adapter live here so routers and services never read os.environ
or talk to SMTP directly.
"""
