# gui/main_gui.py
import logging
import tkinter as tk
from tkinter import ttk, messagebox

from passcheck.constants import CRITERIA_TEXT, MAX_LENGTH, MIN_LENGTH, SECURITY_TIPS
from passcheck.exceptions import ConfigurationError
from passcheck.logging_config import setup_logging
from passcheck.password_utils import StrengthLabel, evaluate, generate
from passcheck.settings import SettingsManager

logger = logging.getLogger(__name__)

LABEL_COLORS = {
    StrengthLabel.EMPTY: "#94A3B8",
    StrengthLabel.WEAK: "#EF4444",
    StrengthLabel.FAIR: "#F59E0B",
    StrengthLabel.GOOD: "#3B82F6",
    StrengthLabel.STRONG: "#10B981",
}


class App(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Password Strength 🔐")
        self.geometry("560x560")
        self.minsize(520, 520)

        # back-end
        self.settings = SettingsManager()  # data/settings.json

        self.password_var = tk.StringVar()
        self.show_var = tk.BooleanVar(value=False)

        policy = self.settings.policy()
        self.length_var = tk.IntVar(value=policy.length)
        self.upper_var = tk.BooleanVar(value=policy.include_uppercase)
        self.lower_var = tk.BooleanVar(value=policy.include_lowercase)
        self.numbers_var = tk.BooleanVar(value=policy.include_numbers)
        self.symbols_var = tk.BooleanVar(value=policy.include_symbols)
        self.ambiguous_var = tk.BooleanVar(value=policy.exclude_ambiguous)

        self.create_widgets()

        # scor la fiecare tastă
        self.password_var.trace_add("write", lambda *_: self.update_strength())
        self.update_strength()

    # ---------- UI -------------------------------------------------

    def create_widgets(self):
        frm = ttk.Frame(self, padding=14)
        frm.pack(fill="both", expand=True)
        frm.columnconfigure(0, weight=1)

        # === parola ===
        ttk.Label(frm, text="Parola:").grid(row=0, column=0, sticky="w")
        row = ttk.Frame(frm)
        row.grid(row=1, column=0, sticky="ew", pady=(2, 8))
        row.columnconfigure(0, weight=1)

        self.entry = ttk.Entry(row, textvariable=self.password_var, show="•")
        self.entry.grid(row=0, column=0, sticky="ew")
        ttk.Checkbutton(row, text="Arată", variable=self.show_var,
                        command=self.toggle_visibility).grid(row=0, column=1, padx=(6, 0))
        ttk.Button(row, text="Copy", command=self.copy_password).grid(row=0, column=2, padx=(6, 0))

        # === tărie ===
        self.bar = ttk.Progressbar(frm, orient="horizontal", maximum=100, mode="determinate")
        self.bar.grid(row=2, column=0, sticky="ew")
        self.strength_label = tk.Label(frm, text="—", anchor="w")
        self.strength_label.grid(row=3, column=0, sticky="w", pady=(2, 8))

        checklist = ttk.LabelFrame(frm, text="Criterii", padding=8)
        checklist.grid(row=4, column=0, sticky="ew")
        self.criteria_labels = {}
        for i, (key, text) in enumerate(CRITERIA_TEXT):
            lbl = tk.Label(checklist, text=f"✗ {text}", anchor="w")
            lbl.grid(row=i // 2, column=i % 2, sticky="w", padx=(0, 18))
            self.criteria_labels[key] = (lbl, text)

        # === generator ===
        gen = ttk.LabelFrame(frm, text="Generator", padding=8)
        gen.grid(row=5, column=0, sticky="ew", pady=(10, 0))

        ttk.Label(gen, text="Lungime:").grid(row=0, column=0, sticky="w")
        ttk.Spinbox(gen, from_=MIN_LENGTH, to=MAX_LENGTH, textvariable=self.length_var,
                    width=5).grid(row=0, column=1, sticky="w")

        ttk.Checkbutton(gen, text="Majuscule", variable=self.upper_var).grid(row=1, column=0, sticky="w")
        ttk.Checkbutton(gen, text="Minuscule", variable=self.lower_var).grid(row=1, column=1, sticky="w")
        ttk.Checkbutton(gen, text="Cifre", variable=self.numbers_var).grid(row=2, column=0, sticky="w")
        ttk.Checkbutton(gen, text="Simboluri", variable=self.symbols_var).grid(row=2, column=1, sticky="w")
        ttk.Checkbutton(gen, text="Fără simboluri ambigue", variable=self.ambiguous_var).grid(
            row=3, column=0, columnspan=2, sticky="w")

        ttk.Button(gen, text="Generează", command=self.generate_password).grid(
            row=4, column=0, columnspan=2, sticky="ew", pady=(8, 0))

        ttk.Button(frm, text="Sfaturi", command=self.show_tips).grid(row=6, column=0, sticky="e", pady=(10, 0))

        self.status = ttk.Label(self, text="—", anchor="w")
        self.status.pack(side="bottom", fill="x", padx=8, pady=(0, 6))

    def toggle_visibility(self):
        self.entry.config(show="" if self.show_var.get() else "•")

    def update_strength(self):
        result = evaluate(self.password_var.get())
        self.bar["value"] = result.percent
        self.strength_label.config(text=f"{result.label.value} ({result.score}/10)",
                                   fg=LABEL_COLORS[result.label])
        for key, (lbl, text) in self.criteria_labels.items():
            ok = result.criteria[key]
            lbl.config(text=f"{'✓' if ok else '✗'} {text}", fg="#10B981" if ok else "#64748B")

    # ---------- Generator ------------------------------------------

    def generate_password(self):
        try:
            length = int(self.length_var.get())
        except (tk.TclError, ValueError):
            messagebox.showwarning("Atenție", "Lungime invalidă.")
            return
        try:
            policy = self.settings.update(
                length=length,
                include_uppercase=self.upper_var.get(),
                include_lowercase=self.lower_var.get(),
                include_numbers=self.numbers_var.get(),
                include_symbols=self.symbols_var.get(),
                exclude_ambiguous=self.ambiguous_var.get(),
            )
        except ConfigurationError as e:
            messagebox.showwarning("Atenție", str(e))
            return

        try:
            self.settings.save()
        except OSError as e:
            logger.warning("Could not save settings: %s", e)

        # setarea variabilei declanșează update_strength
        self.password_var.set(generate(policy))
        self.status.config(text=f"Parolă generată ({policy})")

    def show_tips(self):
        messagebox.showinfo("Sfaturi", "\n\n".join(SECURITY_TIPS))

    # -------- Clipboard --------

    def copy_password(self):
        pwd = self.password_var.get()
        if not pwd:
            self.status.config(text="Nimic de copiat.")
            return
        self.secure_copy(pwd, self.settings.clipboard_clear_seconds)

    def secure_copy(self, text: str, seconds: int = 15):
        """Copiază în clipboard și îl curăță automat după N secunde."""
        try:
            self.clipboard_clear()
            self.clipboard_append(text)
            self.update()
        except tk.TclError as e:
            messagebox.showwarning("Clipboard", f"Nu am putut copia în clipboard: {e}")
            return
        self.status.config(text=f"Parolă copiată în clipboard ({seconds}s)")

        def _clear():
            # dacă între timp userul a copiat altceva, nu-l ștergem
            try:
                if self.clipboard_get() == text:
                    self.clipboard_clear()
                    self.update()
            except tk.TclError:
                # clipboard gol sau deținut de altă aplicație
                pass
            self.status.config(text="Clipboard curățat.")
        self.after(seconds * 1000, _clear)


def run():
    setup_logging()
    app = App()
    app.mainloop()


if __name__ == "__main__":
    run()
