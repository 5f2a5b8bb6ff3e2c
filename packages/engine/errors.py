"""
Error taxonomy.

Only programmer/collaborator bugs are exceptions here. Running out of
candidates and a rejected ("not a word") guess are ordinary outcomes and
travel through return values instead.
"""


class ContractViolation(Exception):
    """A caller broke the core's contract (wrong lengths, bad positions, ...)."""


class ContradictoryFeedback(ContractViolation):
    """Feedback that cannot be reconciled with what is already known."""


class FeedbackFormatError(ValueError):
    """Operator-typed feedback could not be parsed."""
