"""
Greeting Application Service

Stateless liveness greeting.
"""

GREETING = "Hello you!"


class GreetingService:
    """Returns a fixed greeting; touches no store."""

    def say_hello(self) -> str:
        return GREETING
