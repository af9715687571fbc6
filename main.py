import warnings
from getpass import getpass, GetPassWarning

from passcheck.clipboard import copy_to_clipboard
from passcheck.constants import CRITERIA_TEXT, MAX_LENGTH, MIN_LENGTH, SECURITY_TIPS
from passcheck.exceptions import ClipboardError, ConfigurationError
from passcheck.logging_config import setup_logging
from passcheck.password_utils import StrengthResult, evaluate, generate
from passcheck.settings import SettingsManager

try:
    # maschează cu ***** și merge în IDE-uri
    from pwinput import pwinput as hidden_input
except ImportError:
    hidden_input = None


def ask_secret(prompt: str) -> str:
    # preferă pwinput dacă e instalat
    if hidden_input is not None:
        return hidden_input(prompt)
    # fallback la getpass și ascunde warningul enervant
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", GetPassWarning)
        return getpass(prompt)


def format_report(result: StrengthResult) -> str:
    """Scor, bară text (10 celule) și checklist-ul celor șase criterii."""
    bar = "#" * result.score + "-" * (10 - result.score)
    lines = [f"Tărie: {result.label.value} [{bar}] {result.percent}%"]
    for key, text in CRITERIA_TEXT:
        mark = "✓" if result.criteria.get(key) else "✗"
        lines.append(f"  {mark} {text}")
    return "\n".join(lines)


def show_menu():
    print("\n=== PASSWORD STRENGTH ===")
    print("1. Verifică tăria unei parole")
    print("2. Generează o parolă")
    print("3. Setări generator")
    print("4. Sfaturi de securitate")
    print("5. Ieșire")


def confirm(prompt: str) -> bool:
    ans = input(f"{prompt} [da/nu]: ").strip().lower()
    return ans in ("da", "d", "yes", "y")


def offer_copy(password: str):
    if not confirm("Copiez parola în clipboard?"):
        return
    try:
        copy_to_clipboard(password)
        print("[✓] Parola a fost copiată.")
    except ClipboardError as e:
        print(f"⚠️ Nu am putut copia în clipboard: {e}")


def edit_settings(settings: SettingsManager):
    current = settings.values
    print(f"\nPolitica curentă: {settings.policy()}")

    length_str = input(f"Lungime ({MIN_LENGTH}-{MAX_LENGTH}, implicit {current['length']}): ").strip()
    try:
        length = int(length_str) if length_str else current["length"]
    except ValueError:
        print("Lungime invalidă.")
        return

    def ask_flag(text: str, key: str) -> bool:
        default = "da" if current[key] else "nu"
        ans = input(f"{text}? [da/nu] (implicit {default}): ").strip().lower()
        if not ans:
            return current[key]
        return ans in ("da", "d", "yes", "y")

    changes = {
        "length": length,
        "include_uppercase": ask_flag("Majuscule", "include_uppercase"),
        "include_lowercase": ask_flag("Minuscule", "include_lowercase"),
        "include_numbers": ask_flag("Cifre", "include_numbers"),
        "include_symbols": ask_flag("Simboluri", "include_symbols"),
        "exclude_ambiguous": ask_flag("Exclude simbolurile ambigue ({}[]()/...)", "exclude_ambiguous"),
    }
    try:
        policy = settings.update(**changes)
    except ConfigurationError as e:
        print(f"⚠️ Setări invalide: {e}")
        return
    settings.save()
    print(f"[✓] Salvat: {policy}")


def main():
    setup_logging()
    settings = SettingsManager()  # data/settings.json

    while True:
        show_menu()
        choice = input("Alege opțiunea: ").strip()

        if choice == "1":
            pwd = ask_secret("Parola: ")
            print(format_report(evaluate(pwd)))

        elif choice == "2":
            pwd = generate(settings.policy())
            print(f"\nParolă: {pwd}")
            print(format_report(evaluate(pwd)))
            offer_copy(pwd)

        elif choice == "3":
            edit_settings(settings)

        elif choice == "4":
            print()
            for tip in SECURITY_TIPS:
                print(f"- {tip}")

        elif choice == "5":
            print("Bye 👋")
            break

        else:
            print("Opțiune invalidă.")


if __name__ == "__main__":
    main()
