"""Five-card poker hand evaluation.

The ``core`` package holds the card, deck, classifier and scoring pieces.
"""

__all__ = ["core"]
