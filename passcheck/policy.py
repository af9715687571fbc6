from dataclasses import dataclass, asdict

from passcheck.exceptions import ConfigurationError


CLASS_FLAGS = ("include_uppercase", "include_lowercase", "include_numbers", "include_symbols")


@dataclass(frozen=True)
class GeneratorPolicy:
    """
    Politica de generare: lungimea și clasele de caractere activate.
    Toate câmpurile sunt obligatorii; validarea se face la construcție.
    """
    length: int
    include_uppercase: bool
    include_lowercase: bool
    include_numbers: bool
    include_symbols: bool
    exclude_similar: bool
    exclude_ambiguous: bool

    def __post_init__(self):
        # bool e subclasă de int, dar True nu e o lungime validă
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ConfigurationError(
                f"Password length must be an integer, got {self.length!r}",
                field="length", code="INVALID_LENGTH",
            )

        enabled = self.enabled_class_count()
        if enabled == 0:
            raise ConfigurationError(
                "Select at least one character class.",
                field="include_*", code="NO_CHARACTER_CLASS",
            )
        if self.length < enabled:
            raise ConfigurationError(
                f"Length {self.length} is shorter than the {enabled} enabled character classes.",
                field="length", code="LENGTH_TOO_SHORT",
            )

    def enabled_class_count(self) -> int:
        return sum(bool(getattr(self, flag)) for flag in CLASS_FLAGS)

    def to_dict(self) -> dict:
        """Format ușor de salvat în JSON (vezi SettingsManager)."""
        return asdict(self)

    @staticmethod
    def from_dict(data: dict) -> "GeneratorPolicy":
        return GeneratorPolicy(
            length=data["length"],
            include_uppercase=data["include_uppercase"],
            include_lowercase=data["include_lowercase"],
            include_numbers=data["include_numbers"],
            include_symbols=data["include_symbols"],
            exclude_similar=data["exclude_similar"],
            exclude_ambiguous=data["exclude_ambiguous"],
        )

    def __str__(self):
        classes = [flag.replace("include_", "") for flag in CLASS_FLAGS if getattr(self, flag)]
        extra = " (no ambiguous symbols)" if self.exclude_ambiguous else ""
        return f"{self.length} chars: {', '.join(classes)}{extra}"
