from modules.case_convert.core.case import (
    CASE_TYPES,
    CaseType,
    UnsupportedCaseTypeError,
    capitalize,
    convert_case,
    to_case,
    transform_cases,
)
from modules.case_convert.core.words import extract_words, split_points

__all__ = [
    "CASE_TYPES",
    "CaseType",
    "UnsupportedCaseTypeError",
    "capitalize",
    "convert_case",
    "extract_words",
    "split_points",
    "to_case",
    "transform_cases",
]
