"""Crowdsourced content warnings for film catalog pages.

Resolves the work being viewed to a DoesTheDogDie catalog entry,
classifies each topic's yes/no vote tally, and ranks the warnings
to present.
"""

__version__ = "0.1.0"
