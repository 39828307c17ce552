"""Texas hold'em cards, hand scoring and heads-up equity counts."""

__version__ = "0.1.0"
__all__ = ["card", "hand", "equity"]