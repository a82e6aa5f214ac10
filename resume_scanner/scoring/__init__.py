from .ats_checklist import ATS_CHECKS, AtsCheck, evaluate_checklist
from .content import round_half_up, serialize_content, serialized_length, utf16_length
from .critique import score_critique, section_health_score
from .keyphrases import KeywordRanking, extract_key_phrases, extract_seo_keywords
from .match_scorer import score_match
from .tokenizer import tokenize

__all__ = [
    "ATS_CHECKS",
    "AtsCheck",
    "evaluate_checklist",
    "round_half_up",
    "serialize_content",
    "serialized_length",
    "utf16_length",
    "score_critique",
    "section_health_score",
    "KeywordRanking",
    "extract_key_phrases",
    "extract_seo_keywords",
    "score_match",
    "tokenize",
]
