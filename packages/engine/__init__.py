from .config import WORD_LENGTH, check_word_length
from .errors import ContractViolation, ContradictoryFeedback, FeedbackFormatError
from .feedback import ExactMatch, Feedback, NoMatch, WrongPosition, parse_feedback
from .knowledge import KnowledgeStore
from .scoring import score

__all__ = [
    "WORD_LENGTH", "check_word_length",
    "ContractViolation", "ContradictoryFeedback", "FeedbackFormatError",
    "NoMatch", "WrongPosition", "ExactMatch", "Feedback", "parse_feedback",
    "KnowledgeStore", "score",
]
