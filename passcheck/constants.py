"""
Tabele constante folosite de evaluator și de generator.
Sunt imutabile și partajate la nivel de proces.
"""
import re
import string

# --- lungimi -------------------------------------------------------------
MIN_CRITERIA_LENGTH = 8
LENGTH_TIERS = (8, 10, 12, 14)

# intervalul acceptat de UI / setări pentru generator
MIN_LENGTH = 8
MAX_LENGTH = 32
DEFAULT_LENGTH = 12

# --- denylist ------------------------------------------------------------
COMMON_PASSWORDS = frozenset({
    "password", "123456", "123456789", "qwerty", "abc123", "password123",
    "12345678", "12345", "1234567", "1234567890", "111111", "000000",
    "admin", "letmein", "welcome", "monkey", "dragon", "iloveyou",
    "sunshine", "princess", "football", "baseball", "master", "login",
    "passw0rd", "qwerty123", "qwertyuiop", "trustno1", "superman", "starwars",
})

# căutate ca subșir, case-sensitive, în parola originală
COMMON_PATTERNS = tuple(re.compile(p) for p in (
    r"123",
    r"abc",
    r"qwerty",
    r"password",
    r"admin",
    r"letmein",
))

# --- alfabete generator (fără caractere ușor de confundat) ---------------
LOWERCASE = "".join(c for c in string.ascii_lowercase if c not in "ilo")
UPPERCASE = "".join(c for c in string.ascii_uppercase if c not in "IO")
DIGITS = "23456789"
SYMBOLS = "!@#$%^&*()-_=+[]{}|;:,.<>?/~"
AMBIGUOUS_SYMBOLS = "()[]{}|/;:,.<>~"

SIMILAR_CHARACTERS = "ilIoO01"

SECURITY_TIPS = (
    "Use at least 12 characters; length matters more than anything else.",
    "Mix upper and lower case letters, digits and symbols.",
    "Avoid dictionary words, names and keyboard runs like 'qwerty' or '123'.",
    "Never reuse the same password on two different services.",
    "Keep passwords in a password manager instead of writing them down.",
    "This score is a heuristic, not a security guarantee.",
)

# etichetele checklist-ului, în ordinea afișării
CRITERIA_TEXT = (
    ("min_length", "At least 8 characters"),
    ("has_uppercase", "Uppercase letter"),
    ("has_lowercase", "Lowercase letter"),
    ("has_number", "Number"),
    ("has_special_char", "Special character"),
    ("no_common_patterns", "No common patterns"),
)
