"""
Rewrites short present-tense action descriptions into past tense and negation.

Only the first verb phrase of the text is touched:

    "will launch the rocket"  ->  "launched the rocket"
    "launched the rocket"     ->  "did not launch the rocket"
"""
import re

from lemminflect import getAllLemmas, getInflection, getLemma

AUXILIARIES = {
    "will",
    "shall",
    "would",
    "can",
    "could",
    "may",
    "might",
    "must",
    "should",
    "do",
    "does",
    "did",
}

_WORD = re.compile(r"[A-Za-z]+")


def _tokenize(text: str) -> list[str]:
    # Keep whitespace runs as tokens so the text can be rebuilt as-is
    return [token for token in re.split(r"(\s+)", text) if token]


def _is_word(token: str) -> bool:
    return bool(_WORD.fullmatch(token))


def _match_case(word: str, original: str) -> str:
    return word.capitalize() if original[:1].isupper() else word


def _words(tokens: list[str]) -> list[int]:
    return [i for i, token in enumerate(tokens) if _is_word(token)]


def _find_verb_phrase(tokens: list[str]) -> tuple[int | None, int | None]:
    """Return (auxiliary index, verb index) of the first verb phrase."""
    words = _words(tokens)

    for position, i in enumerate(words):
        word = tokens[i].lower()
        if word in AUXILIARIES and position + 1 < len(words):
            verb = words[position + 1]
            if "VERB" not in getAllLemmas(tokens[verb].lower()):
                return None, None
            return i, verb

        # Without an auxiliary only a leading verb counts, "rocket" is a verb too
        if position == 0 and "VERB" in getAllLemmas(word):
            return None, i

    return None, None


def _base_form(word: str) -> str:
    lemmas = getLemma(word.lower(), upos="VERB")
    return lemmas[0] if lemmas else word.lower()


def _past_form(word: str) -> str:
    inflections = getInflection(_base_form(word), tag="VBD")
    return inflections[0] if inflections else word.lower()


def _drop(tokens: list[str], index: int) -> list[str]:
    # Remove the word together with the whitespace that follows it
    end = index + 1
    if end < len(tokens) and tokens[end].isspace():
        end += 1
    return tokens[:index] + tokens[end:]


def to_past_tense(text: str) -> str:
    if not isinstance(text, str):
        raise TypeError(f"Expected a description string, got {type(text).__name__}")

    tokens = _tokenize(text)
    auxiliary, verb = _find_verb_phrase(tokens)
    if verb is None:
        return text

    first = auxiliary if auxiliary is not None else verb
    tokens[verb] = _match_case(_past_form(tokens[verb]), tokens[first])

    if auxiliary is not None:
        tokens = _drop(tokens, auxiliary)

    return "".join(tokens)


def to_negative(text: str) -> str:
    if not isinstance(text, str):
        raise TypeError(f"Expected a description string, got {type(text).__name__}")

    tokens = _tokenize(text)
    auxiliary, verb = _find_verb_phrase(tokens)
    if verb is None:
        return text

    if auxiliary is not None:
        tokens[auxiliary] = f"{tokens[auxiliary]} not"
    else:
        negated = f"did not {_base_form(tokens[verb])}"
        tokens[verb] = _match_case(negated, tokens[verb])

    return "".join(tokens)
