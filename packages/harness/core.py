"""
Round loop (the driver) and simulation primitives.

- run_session: select -> feedback -> apply, until the selector has nothing
               left, the feedback source asks to stop, or the game is solved.
- run_case:    one simulated game against a hidden answer (scored feedback).
- run_batch:   many simulated games in sequence.

Phases of a round:

    AWAITING_GUESS_SELECTION -> AWAITING_FEEDBACK -> APPLYING_FEEDBACK
            ^                                              |
            +----------------------------------------------+
    any of them may end in TERMINATED

These functions are UI-agnostic so the interactive CLI, the simulation CLI
and the tests all share the same loop.
"""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from packages.engine import Feedback, KnowledgeStore
from packages.solvers import BaseSelector
from .sources import ScriptedFeedback

log = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget in simulations.
WORDLE_MAX_TURNS = 6

# Feedback source contract: the chosen word in, feedback out; None = stop.
FeedbackSource = Callable[[str], Optional[Feedback]]
RoundHook = Callable[[int, str, Feedback, KnowledgeStore], None]


class Phase(enum.Enum):
    AWAITING_GUESS_SELECTION = "awaiting_guess_selection"
    AWAITING_FEEDBACK = "awaiting_feedback"
    APPLYING_FEEDBACK = "applying_feedback"
    TERMINATED = "terminated"


# Reasons a session ends.
EXHAUSTED = "exhausted"    # nothing satisfies the accumulated constraints
STOPPED = "stopped"        # feedback source asked to stop
MAX_ROUNDS = "max_rounds"  # round cap reached
SOLVED = "solved"          # feedback was all exact matches


@dataclass
class SessionResult:
    reason: str
    rounds: int
    history: List[Tuple[str, str]] = field(default_factory=list)  # (word, symbols)
    last_word: Optional[str] = None

    @property
    def solved(self) -> bool:
        return self.reason == SOLVED


def run_session(
        knowledge: KnowledgeStore,
        selector: BaseSelector,
        feedback_source: FeedbackSource,
        *,
        max_rounds: int | None = None,
        on_round: RoundHook | None = None,
) -> SessionResult:
    """
    Drive rounds until a terminal condition.

    ContractViolation from the store propagates untouched: the state is
    considered inconsistent and no recovery is attempted.
    """
    history: List[Tuple[str, str]] = []
    phase = Phase.AWAITING_GUESS_SELECTION
    word: Optional[str] = None
    feedback: Optional[Feedback] = None
    reason = ""
    rounds = 0

    while phase is not Phase.TERMINATED:
        if phase is Phase.AWAITING_GUESS_SELECTION:
            if max_rounds is not None and rounds >= max_rounds:
                reason, phase = MAX_ROUNDS, Phase.TERMINATED
                continue
            word = selector.pick_word(knowledge)
            if word is None:
                log.info("no candidate satisfies the constraints after %d round(s)", rounds)
                reason, phase = EXHAUSTED, Phase.TERMINATED
                continue
            phase = Phase.AWAITING_FEEDBACK

        elif phase is Phase.AWAITING_FEEDBACK:
            feedback = feedback_source(word)
            if feedback is None:
                reason, phase = STOPPED, Phase.TERMINATED
                continue
            rounds += 1
            history.append((word, feedback.to_symbols()))
            phase = Phase.APPLYING_FEEDBACK

        elif phase is Phase.APPLYING_FEEDBACK:
            knowledge.apply_feedback(feedback, word)
            if on_round is not None:
                on_round(rounds, word, feedback, knowledge)
            if feedback.is_solved(knowledge.N):
                reason, phase = SOLVED, Phase.TERMINATED
                continue
            phase = Phase.AWAITING_GUESS_SELECTION

    return SessionResult(reason=reason, rounds=rounds, history=history, last_word=word)


def run_case(
        selector: BaseSelector,
        answer: str,
        *,
        words: Iterable[str],
        N: int,
        allowed: Iterable[str] | None = None,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Play one simulated game to completion or `max_turns`.

    Args:
        selector:  a registered selector instance
        answer:    the hidden word for this case
        words:     initial candidate list
        N:         word length
        allowed:   if given, guesses outside it come back as invalid words
        max_turns: round budget (Wordle is 6)
        seed:      reseeds the selector RNG for reproducible random picks

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float), reason (str),
            history (list[(guess, symbols)]), answer (str)
    """
    selector.reset(seed=seed)
    knowledge = KnowledgeStore(words, N=N)
    source = ScriptedFeedback(answer, allowed=allowed)

    t0 = time.perf_counter()
    res = run_session(knowledge, selector, source, max_rounds=max_turns)
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "success": res.solved, "guesses": res.rounds, "time_ms": dt,
        "reason": res.reason, "history": res.history, "answer": answer,
    }


def run_batch(
        selector: BaseSelector,
        answers: List[str],
        *,
        words: List[str],
        N: int,
        allowed: List[str] | None = None,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K answers
    (after filtering to length N) are used.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    pool = [w for w in answers if len(w) == N]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(selector, ans, words=words, N=N, allowed=allowed,
                            max_turns=max_turns, seed=case_seed))
    return out
