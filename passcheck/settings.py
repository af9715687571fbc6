import json
import logging
import os
from json import JSONDecodeError

from dotenv import load_dotenv

from passcheck.constants import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH
from passcheck.exceptions import ConfigurationError
from passcheck.policy import GeneratorPolicy

logger = logging.getLogger(__name__)

# .env din directorul curent, încărcat o singură dată la import
load_dotenv()

DEFAULT_SETTINGS_PATH = "data/settings.json"

DEFAULTS = {
    "length": DEFAULT_LENGTH,
    "include_uppercase": True,
    "include_lowercase": True,
    "include_numbers": True,
    "include_symbols": True,
    "exclude_similar": True,
    "exclude_ambiguous": False,
    "clipboard_clear_seconds": 15,
}

BOOL_SETTINGS = tuple(key for key, value in DEFAULTS.items() if isinstance(value, bool))


def clamp_length(length: int) -> int:
    return max(MIN_LENGTH, min(MAX_LENGTH, length))


class SettingsManager:
    """
    Setările generatorului, salvate în data/settings.json.
    Nu conține niciodată parole.
    """

    def __init__(self, settings_file_path: str = None):
        self.settings_file_path = (
            settings_file_path
            or os.getenv("PASSCHECK_SETTINGS")
            or DEFAULT_SETTINGS_PATH
        )
        self.values = dict(DEFAULTS)

        if os.path.exists(self.settings_file_path):
            try:
                with open(self.settings_file_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (JSONDecodeError, OSError) as e:
                # fișier gol/corupt → rămânem pe valorile implicite
                logger.warning("Ignoring unreadable settings file %s: %s", self.settings_file_path, e)
                data = {}
            if isinstance(data, dict):
                self._merge(data)

    def _merge(self, data: dict):
        """Preia din fișier doar cheile cunoscute, cu tipul corect."""
        for key, default in DEFAULTS.items():
            if key not in data:
                continue
            value = data[key]
            if type(value) is not type(default):
                logger.warning("Setting %r has invalid value %r, using %r", key, value, default)
                continue
            self.values[key] = value
        self.values["length"] = clamp_length(self.values["length"])
        if self.values["clipboard_clear_seconds"] < 1:
            self.values["clipboard_clear_seconds"] = DEFAULTS["clipboard_clear_seconds"]

        try:
            self.policy()
        except ConfigurationError as e:
            logger.warning("Stored generator policy is invalid (%s), using defaults", e)
            for key in DEFAULTS:
                if key != "clipboard_clear_seconds":
                    self.values[key] = DEFAULTS[key]

    @property
    def clipboard_clear_seconds(self) -> int:
        return self.values["clipboard_clear_seconds"]

    def policy(self) -> GeneratorPolicy:
        return GeneratorPolicy.from_dict(self.values)

    def update(self, **changes) -> GeneratorPolicy:
        """
        Aplică modificările doar dacă politica rezultată e validă.
        Ridică ConfigurationError altfel; setările rămân neschimbate.
        """
        unknown = set(changes) - set(DEFAULTS)
        if unknown:
            raise ConfigurationError(
                f"Unknown setting(s): {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0], code="UNKNOWN_SETTING",
            )

        candidate = dict(self.values, **changes)
        length = candidate["length"]
        if isinstance(length, bool) or not isinstance(length, int):
            raise ConfigurationError(f"Password length must be an integer, got {length!r}",
                                     field="length", code="INVALID_LENGTH")
        if not MIN_LENGTH <= length <= MAX_LENGTH:
            raise ConfigurationError(
                f"Length must be between {MIN_LENGTH} and {MAX_LENGTH}.",
                field="length", code="LENGTH_OUT_OF_RANGE",
            )
        seconds = candidate["clipboard_clear_seconds"]
        if isinstance(seconds, bool) or not isinstance(seconds, int) or seconds < 1:
            raise ConfigurationError("Clipboard timeout must be a positive integer.",
                                     field="clipboard_clear_seconds", code="INVALID_CLIPBOARD_TIMEOUT")
        for flag in BOOL_SETTINGS:
            if not isinstance(candidate[flag], bool):
                raise ConfigurationError(f"Setting {flag!r} must be true or false, got {candidate[flag]!r}",
                                         field=flag, code="INVALID_FLAG")

        policy = GeneratorPolicy.from_dict(candidate)
        self.values = candidate
        return policy

    def save(self):
        directory = os.path.dirname(self.settings_file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.settings_file_path, "w", encoding="utf-8") as f:
            json.dump(self.values, f, indent=4)
        logger.info("Settings saved to %s", self.settings_file_path)

    def reset(self):
        """Șterge fișierul de setări și revine la valorile implicite."""
        if os.path.exists(self.settings_file_path):
            os.remove(self.settings_file_path)
        self.values = dict(DEFAULTS)
        logger.info("Settings reset to defaults")
