"""Small utilities: string helpers, clocks, a joinable thread, a timer wheel and a URI parser."""

__version__ = "2.0.0"
__all__ = ["clock", "text", "thread", "timer", "uri"]