from .core import (run_session, run_case, run_batch, Phase, SessionResult,
                   EXHAUSTED, STOPPED, MAX_ROUNDS, SOLVED, WORDLE_MAX_TURNS)
from .sources import TerminalFeedback, ScriptedFeedback, ReplayFeedback
from .io import write_csv, write_manifest

__all__ = ["run_session", "run_case", "run_batch", "Phase", "SessionResult",
           "EXHAUSTED", "STOPPED", "MAX_ROUNDS", "SOLVED", "WORDLE_MAX_TURNS",
           "TerminalFeedback", "ScriptedFeedback", "ReplayFeedback",
           "write_csv", "write_manifest"]
