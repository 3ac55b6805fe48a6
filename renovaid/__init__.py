"""renovaid — renovation subsidy eligibility engine."""

__version__ = "0.1.0"
