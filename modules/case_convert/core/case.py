from __future__ import annotations

from functools import partial
from typing import Any, Callable, Dict, List, Literal, Tuple, get_args

from modules.case_convert.core.words import extract_words

CaseType = Literal[
    "lowercase",
    "uppercase",
    "sentence",
    "title",
    "snake",
    "kebab",
    "camel",
    "pascal",
    "dot",
    "constant",
]

CASE_TYPES: Tuple[str, ...] = get_args(CaseType)


class UnsupportedCaseTypeError(ValueError):
    """Raised when a case type outside ``CASE_TYPES`` is requested."""

    def __init__(self, case_type: object) -> None:
        super().__init__(f"Unsupported case type: {case_type}")
        self.case_type = case_type


def capitalize(word: str) -> str:
    if not word:
        return ""
    return word[0].upper() + word[1:].lower()


def _lower(words: List[str]) -> List[str]:
    return [word.lower() for word in words]


def _upper(words: List[str]) -> List[str]:
    return [word.upper() for word in words]


def _camel(words: List[str]) -> str:
    head = words[0].lower()
    if len(words) == 1:
        return head
    return head + "".join(capitalize(word) for word in words[1:])


_FORMATTERS: Dict[str, Callable[[List[str]], str]] = {
    "lowercase": lambda words: " ".join(_lower(words)),
    "uppercase": lambda words: " ".join(_upper(words)),
    "sentence": lambda words: capitalize(" ".join(_lower(words))),
    "title": lambda words: " ".join(capitalize(word) for word in words),
    "snake": lambda words: "_".join(_lower(words)),
    "kebab": lambda words: "-".join(_lower(words)),
    "camel": _camel,
    "pascal": lambda words: "".join(capitalize(word) for word in words),
    "dot": lambda words: ".".join(_lower(words)),
    "constant": lambda words: "_".join(_upper(words)),
}


def validate_case_type(case_type: Any) -> str:
    if not isinstance(case_type, str) or case_type not in CASE_TYPES:
        raise UnsupportedCaseTypeError(case_type)
    return case_type


def convert_case(text: Any, case_type: CaseType) -> str:
    """Re-join the words of ``text`` in the requested case convention.

    Text without words converts to ``""`` whatever the case type.

    Raises:
        UnsupportedCaseTypeError: ``case_type`` is not one of ``CASE_TYPES``.
    """
    if not isinstance(text, str):
        return ""

    words = extract_words(text)
    if not words:
        return ""
    return _FORMATTERS[validate_case_type(case_type)](words)


class _CaseShortcuts:
    """Single-argument converters, e.g. ``to_case.snake("helloWorld")``."""

    def __init__(self) -> None:
        self.lower = partial(convert_case, case_type="lowercase")
        self.upper = partial(convert_case, case_type="uppercase")
        self.sentence = partial(convert_case, case_type="sentence")
        self.title = partial(convert_case, case_type="title")
        self.snake = partial(convert_case, case_type="snake")
        self.kebab = partial(convert_case, case_type="kebab")
        self.camel = partial(convert_case, case_type="camel")
        self.pascal = partial(convert_case, case_type="pascal")
        self.dot = partial(convert_case, case_type="dot")
        self.constant = partial(convert_case, case_type="constant")


to_case = _CaseShortcuts()


def transform_cases(text: str | None) -> Tuple[Dict[str, object] | None, str | None]:
    if text is None or not text.strip():
        return None, "Text is required."

    words = extract_words(text)
    if not words:
        return None, "Text has no usable words."

    result: Dict[str, object] = {
        "words": words,
        "word_count": len(words),
    }
    for case_type in CASE_TYPES:
        result[case_type] = _FORMATTERS[case_type](words)
    return result, None
