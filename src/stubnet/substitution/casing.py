"""Case-preserving mapping for the reserved substitution pair."""

from stubnet.constants import CASE_MAP


def preserve_case(match_text: str) -> str:
    """Map one matched occurrence to its substitute, keeping its casing.

    ``YALE``/``Yale``/``yale`` use the fixed table. Any other casing falls
    back to the matched text with only the first letter upper-cased.
    """
    mapped = CASE_MAP.get(match_text)
    if mapped is not None:
        return mapped
    return match_text.capitalize()
