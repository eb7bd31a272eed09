"""
String transforms applied to filter values before they reach SQL.
"""


def _is_separator(ch: str) -> bool:
    if ch.isascii():
        return not (ch.isalnum() or ch == "_")
    if ch.isalpha() or ch.isdecimal():
        return False
    # Outside ASCII only whitespace ends a word; punctuation such as « does not
    return ch.isspace()


def _title_char(ch: str) -> str:
    titled = ch.title()
    # Characters without a single-character title form (e.g. "ß") are kept
    return titled if len(titled) == 1 else ch


def title_case(text: str) -> str:
    """
    Upper-case the first letter of every word, leaving other characters alone.

    A word starts at the beginning of the string or after a separator: any
    ASCII character that is not a letter, digit or underscore, or any
    non-ASCII whitespace. So "h&k" becomes "H&K" and "ak-47" becomes "Ak-47".
    Unlike str.title(), existing capitals are kept ("IWI" stays "IWI") and
    letters after digits are not touched ("9mm").
    """
    out = []
    at_word_start = True
    for ch in text:
        out.append(_title_char(ch) if at_word_start else ch)
        at_word_start = _is_separator(ch)
    return "".join(out)
