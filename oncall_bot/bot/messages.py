"""Message templates posted to Slack."""
from __future__ import annotations

ONCALL_MESSAGE = """
According to the On-Call Rotation schedule, you're on call this week.
Please make sure you're available for on-call duties.

You can check the rotation here:
🔗 Notion: https://www.notion.so/go-momos/33e55a34a8834f5f8d8a37e29b452752?v=35cf38209c9045c8b239140040c8ffc9
🔗 Github Queue: https://github.com/momoshub/slackbots/blob/main/queue
🔗 Github Current: https://github.com/momoshub/slackbots/blob/main/current

Thanks! 🙏
"""

GREETING = "Hi {addressee},"
