import logging
import random
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Protocol, Sequence

from passcheck.constants import (
    AMBIGUOUS_SYMBOLS,
    COMMON_PASSWORDS,
    COMMON_PATTERNS,
    DIGITS,
    LENGTH_TIERS,
    LOWERCASE,
    MIN_CRITERIA_LENGTH,
    SYMBOLS,
    UPPERCASE,
)
from passcheck.exceptions import PasscheckError
from passcheck.policy import GeneratorPolicy

logger = logging.getLogger(__name__)

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SPECIAL_RE = re.compile(r"[^A-Za-z0-9]")

# sursa implicită e criptografic sigură; testele pot injecta random.Random(seed)
_default_rng = random.SystemRandom()

# o politică validă are mereu destule șiruri curate; limita doar oprește o sursă stricată
MAX_GENERATE_ATTEMPTS = 1000


class StrengthLabel(str, Enum):
    EMPTY = "Empty"
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"


@dataclass(frozen=True)
class StrengthResult:
    score: int
    label: StrengthLabel
    criteria: Dict[str, bool] = field(default_factory=dict)

    @property
    def percent(self) -> int:
        """Lățimea barei de tărie, în procente."""
        return self.score * 10


class RandomSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...

    def shuffle(self, x: List[str]) -> None: ...


# ---------------------------------------------------------------------------
# Evaluare
# ---------------------------------------------------------------------------

def is_common_password(password: str) -> bool:
    """
    True dacă parola e în lista de parole comune (fără a ține cont de
    majuscule) sau conține unul dintre tiparele interzise.
    """
    if password.lower() in COMMON_PASSWORDS:
        return True
    return any(pattern.search(password) for pattern in COMMON_PATTERNS)


def check_criteria(password: str) -> Dict[str, bool]:
    """Cele șase criterii afișate ca checklist, independente de scor."""
    return {
        "min_length": len(password) >= MIN_CRITERIA_LENGTH,
        "has_uppercase": bool(_UPPER_RE.search(password)),
        "has_lowercase": bool(_LOWER_RE.search(password)),
        "has_number": bool(_DIGIT_RE.search(password)),
        "has_special_char": bool(_SPECIAL_RE.search(password)),
        "no_common_patterns": not is_common_password(password),
    }


def _label_for(score: int) -> StrengthLabel:
    if score <= 3:
        return StrengthLabel.WEAK
    if score <= 6:
        return StrengthLabel.FAIR
    if score <= 8:
        return StrengthLabel.GOOD
    return StrengthLabel.STRONG


def evaluate(password: str) -> StrengthResult:
    """
    Estimează tăria parolei (scor 0..10) după o rubrică euristică.
    Nu e o estimare de entropie și nu garantează nimic din punct de vedere
    al securității.

    Puncte brute (maxim 18):
      +2  pentru fiecare prag de lungime atins din 8, 10, 12, 14
      +2  majusculă / minusculă / cifră / caracter non-alfanumeric
      +2  dacă nu e parolă comună și nu conține tipare interzise
    Scor final = min(10, brut // 2).
    """
    if not password:
        return StrengthResult(
            score=0,
            label=StrengthLabel.EMPTY,
            criteria={key: False for key in check_criteria("")},
        )

    criteria = check_criteria(password)

    raw = 2 * sum(len(password) >= tier for tier in LENGTH_TIERS)
    for key in ("has_uppercase", "has_lowercase", "has_number", "has_special_char"):
        if criteria[key]:
            raw += 2
    if criteria["no_common_patterns"]:
        raw += 2

    score = min(10, raw // 2)
    return StrengthResult(score=score, label=_label_for(score), criteria=criteria)


# ---------------------------------------------------------------------------
# Generare
# ---------------------------------------------------------------------------

def active_alphabets(policy: GeneratorPolicy) -> Dict[str, str]:
    """
    Alfabetele claselor activate, în ordinea fixă upper/lower/digits/symbols.
    Excluderea caracterelor similare e deja inclusă în alfabete.
    """
    pools = {}
    if policy.include_uppercase:
        pools["uppercase"] = UPPERCASE
    if policy.include_lowercase:
        pools["lowercase"] = LOWERCASE
    if policy.include_numbers:
        pools["digits"] = DIGITS
    if policy.include_symbols:
        symbols = SYMBOLS
        if policy.exclude_ambiguous:
            symbols = "".join(c for c in SYMBOLS if c not in AMBIGUOUS_SYMBOLS)
        pools["symbols"] = symbols
    return pools


def generate(policy: GeneratorPolicy, rng: Optional[RandomSource] = None) -> str:
    """
    Generează o parolă aleatoare de exact policy.length caractere, cu cel
    puțin un caracter din fiecare clasă activată,
    care nu e pe denylist și nu conține tipare interzise.
    """
    rng = rng or _default_rng
    pools = active_alphabets(policy)
    all_chars = "".join(pools.values())

    # rejection sampling: ieșirea rămâne uniformă peste parolele care nu sunt pe denylist
    for attempt in range(1, MAX_GENERATE_ATTEMPTS + 1):
        # garantăm cel puțin un char din fiecare pool selectată
        password_chars = [rng.choice(pool) for pool in pools.values()]
        password_chars += [rng.choice(all_chars) for _ in range(policy.length - len(password_chars))]

        # Fisher-Yates, ca să nu rămână caracterele obligatorii la început
        rng.shuffle(password_chars)

        password = "".join(password_chars)
        if not is_common_password(password):
            logger.debug("Generated password: length=%d classes=%s attempts=%d",
                         policy.length, ",".join(pools), attempt)
            return password

    raise PasscheckError(
        f"Could not generate a password outside the denylist in {MAX_GENERATE_ATTEMPTS} attempts.",
        code="DENYLIST_EXHAUSTED", detail=str(policy),
    )
