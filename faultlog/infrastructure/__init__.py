"""Infrastructure layer - Adapters behind the domain protocols.

Structure:
- logging/: Message formatting, logger registry, safe logger, console and
  fallback sinks

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
