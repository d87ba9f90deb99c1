"""Route selection across pools."""

from ammkit.routing.router import QuoteRouter

__all__ = ["QuoteRouter"]
