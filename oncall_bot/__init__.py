"""Weekly on-call rotation with Slack notifications."""

__version__ = "0.1.0"
