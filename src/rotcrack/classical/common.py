from __future__ import annotations

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = len(ALPHABET)
A_ORD = ord("A")


def shift_char(ch: str, shift: int) -> str:
    """Shift one A-Z character by 'shift' (can be negative)."""
    idx = (ord(ch) - A_ORD + shift) % ALPHABET_SIZE
    return chr(A_ORD + idx)


def shift_text(text: str, shift: int) -> str:
    """Caesar shift of ASCII letters; preserves case and everything else."""
    out = []
    for ch in text:
        # Compare ch itself, not ch.upper(): "ı".upper() is "I", "ß".upper() is "SS"
        if "A" <= ch <= "Z":
            out.append(shift_char(ch, shift))
        elif "a" <= ch <= "z":
            out.append(shift_char(ch.upper(), shift).lower())
        else:
            out.append(ch)
    return "".join(out)
